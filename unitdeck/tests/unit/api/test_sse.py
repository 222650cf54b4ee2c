"""Tests for the Server-Sent Events decoder and stream adapter."""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest

from unitdeck.api.client import build_http_client
from unitdeck.api.errors import EntityNotFoundError, StreamUnsupportedError
from unitdeck.api.sse import EventStreamClient, ServerSentEvent, iter_sse_events


async def _lines(*lines: str) -> AsyncIterator[str]:
    for line in lines:
        yield line


async def _collect(*lines: str) -> list[ServerSentEvent]:
    return [event async for event in iter_sse_events(_lines(*lines))]


@pytest.mark.unit
class TestIterSseEvents:
    """Tests for iter_sse_events framing."""

    @pytest.mark.asyncio
    async def test_named_event_without_space(self) -> None:
        events = await _collect("event:log", "data:2024-01-01: started", "")
        assert events == [ServerSentEvent(event="log", data="2024-01-01: started")]

    @pytest.mark.asyncio
    async def test_leading_space_after_colon_is_stripped_once(self) -> None:
        events = await _collect("event: output", "data:  indented", "")
        assert events[0].event == "output"
        assert events[0].data == " indented"

    @pytest.mark.asyncio
    async def test_multiple_data_lines_are_joined(self) -> None:
        events = await _collect("data: first", "data: second", "")
        assert events == [ServerSentEvent(event="message", data="first\nsecond")]

    @pytest.mark.asyncio
    async def test_comments_and_empty_dispatch_are_ignored(self) -> None:
        events = await _collect(": keep-alive", "", "", "event:heartbeat", "data:", "")
        assert [event.event for event in events] == ["heartbeat"]
        assert events[0].data == ""

    @pytest.mark.asyncio
    async def test_id_and_retry_are_recorded(self) -> None:
        events = await _collect("id: 7", "retry: 3000", "retry: soon", "data: x", "")
        assert events[0].id == "7"
        assert events[0].retry == 3000

    @pytest.mark.asyncio
    async def test_carriage_returns_are_removed(self) -> None:
        events = await _collect("event:log\r", "data:line\r", "\r")
        assert events == [ServerSentEvent(event="log", data="line")]

    @pytest.mark.asyncio
    async def test_trailing_event_without_blank_line_is_dropped(self) -> None:
        events = await _collect("event:log", "data:one", "", "event:log", "data:two")
        assert [event.data for event in events] == ["one"]


@pytest.mark.unit
class TestEventStreamClient:
    """Tests for EventStreamClient.open over a mock transport."""

    @pytest.mark.asyncio
    async def test_streams_events_and_sends_params(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                headers={"content-type": "text/event-stream; charset=utf-8"},
                content=b"event:log\ndata:a: b\n\nevent:close\ndata:bye\n\n",
            )

        http = build_http_client("http://backend.test/api", transport=httpx.MockTransport(handler))
        client = EventStreamClient(http)
        async with client.open("/services/nginx/logs", {"lines": 50}) as events:
            received = [event async for event in events]
        await http.aclose()

        assert [event.event for event in received] == ["log", "close"]
        assert seen[0].url.path == "/api/services/nginx/logs"
        assert seen[0].url.params["lines"] == "50"
        assert seen[0].headers["accept"] == "text/event-stream"

    @pytest.mark.asyncio
    async def test_not_found_raises_entity_not_found(self) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(404, json={"error": "unit not found"})
        )
        http = build_http_client("http://backend.test/api", transport=transport)
        with pytest.raises(EntityNotFoundError) as exc_info:
            async with EventStreamClient(http).open("/services/missing/logs"):
                pass
        await http.aclose()
        assert exc_info.value.message == "unit not found"

    @pytest.mark.asyncio
    async def test_json_response_is_unsupported(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"ok": True}))
        http = build_http_client("http://backend.test/api", transport=transport)
        with pytest.raises(StreamUnsupportedError):
            async with EventStreamClient(http).open("/services/nginx/logs"):
                pass
        await http.aclose()
