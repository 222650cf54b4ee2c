"""Tests for ExecSession."""

from __future__ import annotations

import json

import httpx
import pytest

from unitdeck.sync.exec_session import ExecSession

EXEC = "/containers/abc/exec"
EXEC_OUTPUT = "/containers/abc/exec/output"


def _session(backend) -> tuple[ExecSession, object]:
    context = backend.context()
    return ExecSession(context.containers, context.streams, "abc"), context


@pytest.mark.unit
class TestExecSession:
    """Tests for ExecSession."""

    @pytest.mark.asyncio
    async def test_streams_output_until_done(self, backend, wait_until) -> None:
        backend.route("POST", EXEC, lambda request: httpx.Response(200, json={"status": "ok"}))
        backend.sse(EXEC_OUTPUT, ("output", "total 0"), ("output", "drwxr-xr-x ."), ("done", ""))
        session, context = _session(backend)

        await session.execute("  ls -la  ")
        assert session.is_running
        await session.wait()

        assert session.output == ["total 0", "drwxr-xr-x ."]
        assert not session.is_running
        assert session.error is None
        assert json.loads(backend.requests_to("POST", EXEC)[0].content) == {"command": "ls -la"}
        await context.aclose()

    @pytest.mark.asyncio
    async def test_error_event(self, backend) -> None:
        backend.route("POST", EXEC, lambda request: httpx.Response(200))
        backend.sse(EXEC_OUTPUT, ("error", "executable not found"))
        session, context = _session(backend)

        await session.execute("nope")
        await session.wait()

        assert session.error == "executable not found"
        assert not session.is_running
        await context.aclose()

    @pytest.mark.asyncio
    async def test_rejected_command(self, backend) -> None:
        backend.json("POST", EXEC, {"error": "container is not running"}, status=409)
        session, context = _session(backend)

        await session.execute("ls")

        assert "container is not running" in session.error
        assert not session.is_running
        assert backend.requests_to("GET", EXEC_OUTPUT) == []
        await context.aclose()

    @pytest.mark.asyncio
    async def test_empty_command(self, backend) -> None:
        session, context = _session(backend)
        await session.execute("   ")
        assert session.error == "Container ID and command are required"
        assert backend.requests == []
        await context.aclose()

    @pytest.mark.asyncio
    async def test_cancel_keeps_output(self, backend, wait_until) -> None:
        backend.route("POST", EXEC, lambda request: httpx.Response(200))
        backend.sse(EXEC_OUTPUT, ("output", "tick"))
        session, context = _session(backend)

        await session.execute("tail -f /var/log/app.log")
        await wait_until(lambda: session.output == ["tick"])
        await session.cancel()

        assert not session.is_running
        assert session.output == ["tick"]
        await context.aclose()

    @pytest.mark.asyncio
    async def test_event_stream_acknowledgement(self, backend) -> None:
        backend.route(
            "POST",
            EXEC,
            lambda request: httpx.Response(
                200,
                headers={"content-type": "text/event-stream"},
                content=b"event:output\ndata:hello\n\nevent:done\ndata:\n\n",
            ),
        )
        backend.sse(EXEC_OUTPUT, ("output", "hello"), ("done", ""))
        session, context = _session(backend)

        await session.execute("echo hello")
        await session.wait()

        assert session.error is None
        assert session.output == ["hello"]
        assert len(backend.requests_to("GET", EXEC_OUTPUT)) == 1
        await context.aclose()

    @pytest.mark.asyncio
    async def test_new_command_replaces_running_stream(self, backend, wait_until) -> None:
        backend.route("POST", EXEC, lambda request: httpx.Response(200))
        served: list[httpx.Request] = []

        async def held_output():
            yield b"event:output\ndata:first\n\n"
            await backend.release.wait()
            yield b"event:output\ndata:late first\n\n"

        def output(request: httpx.Request) -> httpx.Response:
            served.append(request)
            if len(served) == 1:
                content = held_output()
            else:
                content = b"event:output\ndata:second\n\nevent:done\ndata:\n\n"
            return httpx.Response(200, headers={"content-type": "text/event-stream"}, content=content)

        backend.route("GET", EXEC_OUTPUT, output)
        session, context = _session(backend)

        await session.execute("tail -f app.log")
        await wait_until(lambda: session.output == ["first"])
        await session.execute("echo second")
        backend.release.set()
        await session.wait()

        assert session.output == ["second"]
        assert session.error is None
        assert not session.is_running
        await context.aclose()
