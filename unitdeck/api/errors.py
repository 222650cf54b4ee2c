"""Exceptions raised by the backend transport adapters."""

from __future__ import annotations


class ApiError(Exception):
    """Base exception for backend communication failures."""


class ApiTransportError(ApiError):
    """Raised when the backend cannot be reached (refused, DNS, protocol)."""


class ApiTimeoutError(ApiTransportError):
    """Raised when a request exceeds its timeout."""


class ApiResponseError(ApiError):
    """Raised for non-success HTTP responses.

    Attributes:
        status_code: HTTP status returned by the backend.
        message: Error text from the backend's ``{"error": ...}`` body, or
            the reason phrase.
    """

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class EntityNotFoundError(ApiResponseError):
    """Raised when the requested service or container does not exist."""


class ApiPayloadError(ApiError):
    """Raised when a response body does not have the expected shape."""


class StreamError(ApiError):
    """Raised when the backend emits an error event on a push stream."""


class StreamUnsupportedError(ApiError):
    """Raised when an endpoint does not answer with an event stream."""


__all__ = [
    "ApiError",
    "ApiPayloadError",
    "ApiResponseError",
    "ApiTimeoutError",
    "ApiTransportError",
    "EntityNotFoundError",
    "StreamError",
    "StreamUnsupportedError",
]
