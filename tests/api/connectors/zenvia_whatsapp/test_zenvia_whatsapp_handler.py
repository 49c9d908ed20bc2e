"""Testes do adapter Zenvia WhatsApp (ZW)."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import httpx
import pytest

from api.connectors.outbound import SendPolicy
from api.connectors.zenvia_whatsapp import ZenviaWhatsAppHandler
from app.domain import MsgStatusValue
from tests.fakes.fake_gateway import (
    FakeServer,
    RecordingTransport,
    make_channel,
    make_outbound,
    make_request,
    unreachable_transport,
)
from utils.errors import ConfigError, IgnoredEvent, ValidationError

SEND_URL = "https://zw.test/v2/channels/whatsapp/messages"


def _message_event(contents: list[dict[str, Any]], **overrides: Any) -> dict[str, Any]:
    event: dict[str, Any] = {
        "id": "evt-1",
        "timestamp": "2017-05-03T06:04:45Z",
        "type": "MESSAGE",
        "message": {
            "id": "msg-ext-1",
            "from": "5511999998888",
            "to": "5511900000000",
            "direction": "IN",
            "channel": "whatsapp",
            "contents": contents,
        },
        "visitor": {"name": "Maria"},
    }
    event.update(overrides)
    return event


def _handler(transport: RecordingTransport, **kwargs: Any) -> tuple[ZenviaWhatsAppHandler, FakeServer]:
    handler = ZenviaWhatsAppHandler(transport.client(), send_url=SEND_URL, **kwargs)
    server = FakeServer()
    handler.initialize(server)
    return handler, server


@pytest.fixture
def channel():
    return make_channel("ZW", {"api_key": "zw-token"}, address="+5511900000000")


class TestReceive:
    """Rota `receive`."""

    @pytest.mark.asyncio
    async def test_fans_out_one_msg_per_content(self, channel) -> None:
        handler, server = _handler(RecordingTransport([]))
        event = _message_event(
            [
                {"type": "text", "text": "Olá"},
                {"type": "file", "fileUrl": "https://cdn.test/a.jpg", "fileMimeType": "image/jpeg"},
                {"type": "location", "latitude": -23.5, "longitude": -46.6},
            ]
        )

        result = await server.routes[("ZW", "POST", "receive")](channel, make_request(event))

        texts = [msg.text for msg in result.msgs]
        attachments = [msg.attachments for msg in result.msgs]
        assert texts == ["Olá", "", ""]
        assert attachments == [(), ("https://cdn.test/a.jpg",), ("geo:-23.500000,-46.600000",)]
        assert {str(msg.urn) for msg in result.msgs} == {"whatsapp:5511999998888"}
        assert {msg.external_id for msg in result.msgs} == {"msg-ext-1"}
        assert {msg.contact_name for msg in result.msgs} == {"Maria"}
        assert result.msgs[0].received_on == datetime(2017, 5, 3, 6, 4, 45, tzinfo=UTC)
        assert handler.channel_type == "ZW"

    @pytest.mark.asyncio
    async def test_unsupported_content_is_skipped(self, channel) -> None:
        _, server = _handler(RecordingTransport([]))
        event = _message_event([{"type": "sticker"}, {"type": "text", "text": "oi"}])

        result = await server.routes[("ZW", "POST", "receive")](channel, make_request(event))

        assert [msg.text for msg in result.msgs] == ["oi"]

    @pytest.mark.asyncio
    async def test_only_unsupported_content_is_ignored(self, channel) -> None:
        _, server = _handler(RecordingTransport([]))

        with pytest.raises(IgnoredEvent):
            await server.routes[("ZW", "POST", "receive")](
                channel, make_request(_message_event([{"type": "contacts"}]))
            )

    @pytest.mark.asyncio
    async def test_outgoing_direction_is_ignored(self, channel) -> None:
        _, server = _handler(RecordingTransport([]))
        event = _message_event([{"type": "text", "text": "oi"}])
        event["message"]["direction"] = "OUT"

        with pytest.raises(IgnoredEvent) as exc_info:
            await server.routes[("ZW", "POST", "receive")](channel, make_request(event))
        assert exc_info.value.reason == "ignoring request, not incoming messages"

    @pytest.mark.asyncio
    async def test_invalid_timestamp(self, channel) -> None:
        _, server = _handler(RecordingTransport([]))
        event = _message_event([{"type": "text", "text": "oi"}], timestamp="03/05/2017")

        with pytest.raises(ValidationError) as exc_info:
            await server.routes[("ZW", "POST", "receive")](channel, make_request(event))
        assert "invalid date format" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_missing_required_field(self, channel) -> None:
        _, server = _handler(RecordingTransport([]))
        event = _message_event([{"type": "text", "text": "oi"}])
        del event["message"]["from"]

        with pytest.raises(ValidationError):
            await server.routes[("ZW", "POST", "receive")](channel, make_request(event))


class TestStatus:
    """Rota `status`."""

    @pytest.mark.asyncio
    async def test_maps_status_by_external_id(self, channel) -> None:
        _, server = _handler(RecordingTransport([]))
        event = {
            "id": "evt-2",
            "type": "MESSAGE_STATUS",
            "messageId": "msg-ext-9",
            "messageStatus": {"timestamp": "2017-05-03T06:04:45Z", "code": "DELIVERED"},
        }

        result = await server.routes[("ZW", "POST", "status")](channel, make_request(event))

        (status,) = result.statuses
        assert status.external_id == "msg-ext-9"
        assert status.status is MsgStatusValue.DELIVERED

    @pytest.mark.asyncio
    async def test_unknown_code_is_errored(self, channel) -> None:
        _, server = _handler(RecordingTransport([]))
        event = {"type": "MESSAGE_STATUS", "messageId": "m", "messageStatus": {"code": "WAT"}}

        result = await server.routes[("ZW", "POST", "status")](channel, make_request(event))

        assert result.statuses[0].status is MsgStatusValue.ERRORED


class TestSend:
    """Envio outbound."""

    @pytest.mark.asyncio
    async def test_file_then_text_one_request_each(self, channel) -> None:
        transport = RecordingTransport(
            [httpx.Response(200, json={"id": "ext-1"}), httpx.Response(200, json={"id": "ext-2"})]
        )
        handler, _ = _handler(transport)
        msg = make_outbound(
            channel, "whatsapp:5511999998888", "Olá", ("image/jpeg:https://cdn.test/a.jpg",)
        )

        status = await handler.send(msg)

        assert status.status is MsgStatusValue.WIRED
        assert status.external_id == "ext-1"
        assert transport.json_bodies() == [
            {
                "from": "5511900000000",
                "to": "5511999998888",
                "contents": [
                    {"type": "file", "fileUrl": "https://cdn.test/a.jpg", "fileMimeType": "image/jpeg"}
                ],
            },
            {
                "from": "5511900000000",
                "to": "5511999998888",
                "contents": [{"type": "text", "text": "Olá"}],
            },
        ]
        assert transport.requests[0].headers["X-API-TOKEN"] == "zw-token"
        assert len(status.logs) == 2

    @pytest.mark.asyncio
    async def test_long_text_is_split_in_order(self, channel) -> None:
        transport = RecordingTransport(lambda request: httpx.Response(200, json={"id": "ext"}))
        handler, _ = _handler(transport)
        text = "a" * 2300

        status = await handler.send(make_outbound(channel, "whatsapp:5511999998888", text))

        sent = [body["contents"][0]["text"] for body in transport.json_bodies()]
        assert status.status is MsgStatusValue.WIRED
        assert [len(part) for part in sent] == [1152, 1148]
        assert "".join(sent) == text

    @pytest.mark.asyncio
    async def test_missing_id_in_response_is_error(self, channel) -> None:
        transport = RecordingTransport([httpx.Response(200, json={})])
        handler, _ = _handler(transport)

        status = await handler.send(make_outbound(channel, "whatsapp:5511999998888", "oi"))

        assert status.status is MsgStatusValue.ERRORED
        assert status.error.reason == "missing_external_id"
        assert status.logs[0].error is not None

    @pytest.mark.asyncio
    async def test_abort_policy_stops_after_failed_part(self, channel) -> None:
        transport = RecordingTransport([httpx.Response(500), httpx.Response(200, json={"id": "x"})])
        handler, _ = _handler(transport)
        msg = make_outbound(channel, "whatsapp:5511999998888", "oi", ("https://cdn.test/a.pdf",))

        status = await handler.send(msg)

        assert status.status is MsgStatusValue.ERRORED
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_best_effort_policy_sends_all_parts(self, channel) -> None:
        transport = RecordingTransport([httpx.Response(500), httpx.Response(200, json={"id": "x"})])
        handler, _ = _handler(transport, policy=SendPolicy.BEST_EFFORT)
        msg = make_outbound(channel, "whatsapp:5511999998888", "oi", ("https://cdn.test/a.pdf",))

        status = await handler.send(msg)

        assert status.status is MsgStatusValue.ERRORED
        assert status.external_id == "x"
        assert len(transport.requests) == 2

    @pytest.mark.asyncio
    async def test_network_failure_is_errored_with_log(self, channel) -> None:
        handler, _ = _handler(RecordingTransport(unreachable_transport))

        status = await handler.send(make_outbound(channel, "whatsapp:5511999998888", "oi"))

        assert status.status is MsgStatusValue.ERRORED
        assert status.error.reason == "http_connection_error"
        assert len(status.logs) == 1

    @pytest.mark.asyncio
    async def test_missing_token_raises_before_network(self) -> None:
        transport = RecordingTransport([])
        handler, _ = _handler(transport)

        with pytest.raises(ConfigError):
            await handler.send(make_outbound(make_channel("ZW"), "whatsapp:5511999998888", "oi"))
        assert transport.requests == []


def test_backend_before_initialize_raises() -> None:
    handler = ZenviaWhatsAppHandler(RecordingTransport([]).client())

    with pytest.raises(RuntimeError):
        _ = handler.backend
