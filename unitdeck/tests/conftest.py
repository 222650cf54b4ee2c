"""Shared fixtures: an in-process backend served through httpx.MockTransport."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

import httpx
import pytest

from unitdeck.context import AppContext
from unitdeck.models.state.app_settings import AppSettings

Handler = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


class FakeBackend:
    """Routes requests by (method, path) with the ``/api`` prefix stripped.

    Event streams hold the connection open after their events until
    ``release`` is set, like the real backend does between log lines.
    """

    BASE_URL = "http://backend.test/api"

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Handler] = {}
        self.requests: list[httpx.Request] = []
        self.release = asyncio.Event()

    def route(self, method: str, path: str, handler: Handler) -> None:
        self.routes[(method, path)] = handler

    def json(self, method: str, path: str, body: Any, status: int = 200) -> None:
        self.route(method, path, lambda request: httpx.Response(status, json=body))

    def sse(self, path: str, *events: tuple[str, str], hold: bool = True) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                headers={"content-type": "text/event-stream"},
                content=self._event_body(events, hold),
            )

        self.route("GET", path, handler)

    async def _event_body(
        self, events: tuple[tuple[str, str], ...], hold: bool
    ) -> AsyncIterator[bytes]:
        for name, data in events:
            yield f"event:{name}\ndata:{data}\n\n".encode()
        if hold:
            await self.release.wait()

    def requests_to(self, method: str, path: str) -> list[httpx.Request]:
        return [
            request
            for request in self.requests
            if request.method == method and request.url.path == f"/api{path}"
        ]

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        handler = self.routes.get((request.method, path))
        if handler is None:
            return httpx.Response(404, json={"error": f"no route for {request.method} {path}"})
        response = handler(request)
        if inspect.isawaitable(response):
            response = await response
        return response

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def settings(self, **overrides: Any) -> AppSettings:
        values: dict[str, Any] = {"api_url": self.BASE_URL, "retry_delay_ms": 0}
        values.update(overrides)
        return AppSettings(**values)

    def context(self, **overrides: Any) -> AppContext:
        return AppContext.create(self.settings(**overrides), transport=self.transport())


@pytest.fixture
def backend() -> FakeBackend:
    """Fresh fake backend per test."""
    return FakeBackend()


@pytest.fixture
def wait_until() -> Callable[..., Awaitable[None]]:
    """Poll a predicate on the running loop until it holds."""

    async def _wait(predicate: Callable[[], bool], timeout: float = 2.0) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while not predicate():
            if loop.time() > deadline:
                raise AssertionError("condition not met before timeout")
            await asyncio.sleep(0.005)

    return _wait


# =============================================================================
# Sample payloads
# =============================================================================


def service_payload(name: str, **fields: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": name,
        "description": f"{name} daemon",
        "loadState": "loaded",
        "activeState": "active",
        "subState": "running",
        "cpuUsage": 1.5,
        "memoryUsage": 1048576,
        "uptime": 3600,
    }
    payload.update(fields)
    return payload


def container_payload(container_id: str, **fields: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": container_id,
        "name": f"/{container_id}-name",
        "image": "nginx:latest",
        "status": {"running": True, "state": "running", "exitCode": 0, "pid": 42},
        "cpuUsage": 0.5,
        "memoryUsage": 2048,
        "ports": "0.0.0.0:8080->80/tcp",
        "networks": None,
        "mounts": None,
    }
    payload.update(fields)
    return payload


@pytest.fixture
def make_service() -> Callable[..., dict[str, Any]]:
    return service_payload


@pytest.fixture
def make_container() -> Callable[..., dict[str, Any]]:
    return container_payload
