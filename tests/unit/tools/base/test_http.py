"""Tests for the shared call executor."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from toolbridge.tools.base.exceptions import ResponseReadError, TransportError
from toolbridge.tools.base.http import execute


class _TrackingStream(httpx.AsyncByteStream):
    def __init__(self, fail: bool) -> None:
        self.fail = fail
        self.closed = False

    async def __aiter__(self):  # type: ignore[override]
        if self.fail:
            raise httpx.ReadError("read error")
        yield b"chunk-1,"
        yield b"chunk-2"

    async def aclose(self) -> None:
        self.closed = True


class TestExecute:
    async def test_returns_full_body(self, make_client: Callable[..., httpx.AsyncClient]) -> None:
        stream = _TrackingStream(fail=False)

        async with make_client(lambda request: httpx.Response(200, stream=stream)) as client:
            body = await execute(client, client.build_request("GET", "https://example.com/"))

        assert body == b"chunk-1,chunk-2"
        assert stream.closed

    async def test_stream_closed_on_read_failure(self, make_client: Callable[..., httpx.AsyncClient]) -> None:
        stream = _TrackingStream(fail=True)

        async with make_client(lambda request: httpx.Response(200, stream=stream)) as client:
            with pytest.raises(ResponseReadError):
                await execute(client, client.build_request("GET", "https://example.com/"))

        assert stream.closed

    async def test_unsupported_scheme_is_transport_error(self) -> None:
        async with httpx.AsyncClient() as client:
            with pytest.raises(TransportError):
                await execute(client, client.build_request("DELETE", "ftp://example.com/file"))

    async def test_status_not_interpreted(self, make_client: Callable[..., httpx.AsyncClient]) -> None:
        async with make_client(lambda request: httpx.Response(500, text="boom")) as client:
            body = await execute(client, client.build_request("GET", "https://example.com/"))

        assert body == b"boom"
