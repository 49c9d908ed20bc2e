"""Adapter Zenvia WhatsApp (ZW): rotas `receive`/`status` e envio por parte."""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

from api.connectors.outbound import SendPolicy, exchange, send_parts
from api.normalizers.zenvia_whatsapp import (
    ZenviaWhatsAppPayload,
    ZenviaWhatsAppStatusPayload,
    normalize_messages,
    normalize_status,
)
from api.payload_builders.zenvia_whatsapp import build_contents, build_request
from api.validators import decode_and_validate
from app.domain import CONFIG_API_KEY, MsgStatusValue
from app.protocols import InboundResult
from config.settings.zenvia import ZENVIA_WHATSAPP_SEND_URL
from utils.errors import ConfigError, ProviderError

if TYPE_CHECKING:
    from app.domain import Channel, MsgStatus, OutboundMsg
    from app.infra.http import HttpClient, RequestResponse
    from app.protocols import BackendProtocol, InboundRequest, ServerProtocol
    from utils.errors import GatewayError

logger = logging.getLogger(__name__)

DEFAULT_SEND_URL = ZENVIA_WHATSAPP_SEND_URL


def _check_send_response(rr: RequestResponse) -> GatewayError | None:
    if not rr.ok:
        return ProviderError(f"received non 200 status: {rr.status_code}", reason="http_status_not_ok")
    body = rr.json()
    if not isinstance(body, dict) or not body.get("id"):
        return ProviderError("unable to get id from body", reason="missing_external_id")
    return None


class ZenviaWhatsAppHandler:
    """Zenvia WhatsApp: fan-out inbound e uma requisição por parte outbound."""

    channel_type = "ZW"
    name = "Zenvia WhatsApp"

    def __init__(
        self,
        http_client: HttpClient,
        *,
        send_url: str = DEFAULT_SEND_URL,
        policy: SendPolicy = SendPolicy.ABORT_ON_FIRST_FAILURE,
    ) -> None:
        self._http = http_client
        self._send_url = send_url
        self._policy = policy
        self._backend: BackendProtocol | None = None

    @property
    def backend(self) -> BackendProtocol:
        if self._backend is None:
            raise RuntimeError(f"{self.name} handler used before initialize()")
        return self._backend

    def initialize(self, server: ServerProtocol) -> None:
        self._backend = server.backend
        server.add_handler_route(self, "POST", "receive", self.receive_message)
        server.add_handler_route(self, "POST", "status", self.receive_status)

    async def receive_message(self, channel: Channel, request: InboundRequest) -> InboundResult:
        payload = decode_and_validate(ZenviaWhatsAppPayload, request.body.reader())
        msgs = normalize_messages(self.backend, channel, payload)
        return InboundResult(msgs=tuple(msgs))

    async def receive_status(self, channel: Channel, request: InboundRequest) -> InboundResult:
        payload = decode_and_validate(ZenviaWhatsAppStatusPayload, request.body.reader())
        status = normalize_status(self.backend, channel, payload)
        return InboundResult(statuses=(status,))

    async def send(self, msg: OutboundMsg) -> MsgStatus:
        token = msg.channel.config_value(CONFIG_API_KEY)
        if not token:
            raise ConfigError(f"no token set for {self.channel_type} channel")

        status = self.backend.new_status_for_id(msg.channel, msg.id, MsgStatusValue.ERRORED)
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "X-API-TOKEN": token,
        }
        send_part = partial(self._send_content, status, msg, headers)
        return await send_parts(status, build_contents(msg), send_part, policy=self._policy)

    async def _send_content(
        self,
        status: MsgStatus,
        msg: OutboundMsg,
        headers: dict[str, str],
        content: dict[str, str],
    ) -> str:
        rr = await exchange(
            status,
            "Message Sent",
            self._http.post(self._send_url, json=build_request(msg, content), headers=headers),
            check=_check_send_response,
        )
        return str(rr.json()["id"])
