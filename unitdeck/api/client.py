"""HTTP client adapter for the backend REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from unitdeck.api.errors import (
    ApiPayloadError,
    ApiResponseError,
    ApiTimeoutError,
    ApiTransportError,
    EntityNotFoundError,
)
from unitdeck.constants.timeouts import API_CONNECT_TIMEOUT, API_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


def build_http_client(
    base_url: str,
    *,
    timeout: float = API_REQUEST_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the process-wide httpx client shared by every adapter.

    Args:
        base_url: Backend base URL, e.g. ``http://localhost:9733/api``.
        timeout: Default request timeout in seconds.
        transport: Optional transport override (tests use httpx.MockTransport).
    """
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout, connect=API_CONNECT_TIMEOUT),
        headers={"Content-Type": "application/json"},
        transport=transport,
    )


def _error_message(response: httpx.Response) -> str:
    """Extract the backend's error text from a failed response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.text.strip() or response.reason_phrase


def raise_for_response(response: httpx.Response) -> None:
    """Raise ApiResponseError (or EntityNotFoundError) for non-2xx responses.

    The response body must already be read.
    """
    if response.is_success:
        return
    message = _error_message(response)
    if response.status_code == httpx.codes.NOT_FOUND:
        raise EntityNotFoundError(response.status_code, message)
    raise ApiResponseError(response.status_code, message)


class ApiClient:
    """Thin JSON adapter over an injected ``httpx.AsyncClient``.

    Every httpx failure is translated into the ``unitdeck.api.errors``
    hierarchy so callers only handle ApiError.
    """

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http = http_client

    @property
    def http(self) -> httpx.AsyncClient:
        return self._http

    async def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET ``path`` and return the decoded JSON body."""
        response = await self._request("GET", path, params=params)
        return self._decode(response)

    async def post_json(self, path: str, payload: Any | None = None) -> Any:
        """POST ``payload`` to ``path``; returns decoded JSON or None for empty bodies."""
        if payload is None:
            response = await self._request("POST", path)
        else:
            response = await self._request("POST", path, json=payload)
        if not response.content:
            return None
        return self._decode(response)

    async def post(self, path: str, payload: Any | None = None) -> None:
        """POST ``payload`` to ``path``, checking the status but not the body."""
        if payload is None:
            await self._request("POST", path)
        else:
            await self._request("POST", path, json=payload)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            logger.warning("%s %s timed out: %s", method, path, exc)
            raise ApiTimeoutError(f"{method} {path} timed out") from exc
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise ApiTransportError(f"{method} {path} failed: {exc}") from exc

        if not response.is_success:
            logger.error("%s %s returned %s", method, path, response.status_code)
        raise_for_response(response)
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ApiPayloadError(f"Invalid JSON from {response.request.url}") from exc
