"""Testes do HttpClient (snapshots para ChannelLog e erros de transporte)."""

from __future__ import annotations

import httpx
import pytest

from tests.fakes.fake_gateway import RecordingTransport, unreachable_transport
from utils.errors import NetworkError


class TestHttpClient:
    """Testes para HttpClient."""

    @pytest.mark.asyncio
    async def test_post_json_returns_snapshot(self) -> None:
        transport = RecordingTransport([httpx.Response(200, json={"id": "abc"})])

        rr = await transport.client().post(
            "https://api.example.com/send",
            json={"text": "olá"},
            headers={"X-API-TOKEN": "secret"},
        )

        assert rr.ok
        assert rr.method == "POST"
        assert rr.url == "https://api.example.com/send"
        assert rr.request_body == '{"text": "olá"}'
        assert rr.json() == {"id": "abc"}
        assert transport.requests[0].headers["X-API-TOKEN"] == "secret"

    @pytest.mark.asyncio
    async def test_non_2xx_is_returned_not_raised(self) -> None:
        transport = RecordingTransport([httpx.Response(500, text="boom")])

        rr = await transport.client().get("https://api.example.com/x")

        assert not rr.ok
        assert rr.status_code == 500
        assert rr.text == "boom"
        assert rr.json() is None

    @pytest.mark.asyncio
    async def test_transport_error_becomes_network_error(self) -> None:
        transport = RecordingTransport(unreachable_transport)

        with pytest.raises(NetworkError) as exc_info:
            await transport.client().post("https://api.example.com/send", json={"a": 1})

        snapshot = exc_info.value.request_response
        assert exc_info.value.reason == "http_connection_error"
        assert snapshot is not None
        assert snapshot.status_code == 0
        assert snapshot.request_body == '{"a": 1}'

    @pytest.mark.asyncio
    async def test_multipart_snapshot_omits_file_content(self) -> None:
        transport = RecordingTransport([httpx.Response(200, json={"ok": True})])

        rr = await transport.client().post(
            "https://api.example.com/upload",
            data={"channels": "C1"},
            files={"file": ("foto.jpg", b"\xff\xd8binario")},
        )

        assert rr.request_body == "multipart/form-data files=[foto.jpg] fields=['channels']"
