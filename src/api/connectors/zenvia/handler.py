"""Adapter Zenvia SMS (ZV): rotas `receive`/`status` e envio por partes de 150."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from api.connectors.outbound import SendPolicy, exchange, send_parts
from api.normalizers.zenvia import (
    ZenviaMessagePayload,
    ZenviaStatusPayload,
    normalize_message,
    normalize_status,
)
from api.payload_builders.zenvia import build_parts, build_request
from api.status_mappers import ZENVIA_SMS_STATUS
from api.validators import decode_and_validate
from app.domain import CONFIG_PASSWORD, CONFIG_USERNAME, MsgStatusValue
from app.protocols import InboundResult
from config.settings.zenvia import ZENVIA_SMS_SEND_URL
from utils.errors import ConfigError, ProviderError

if TYPE_CHECKING:
    from app.domain import Channel, MsgStatus, OutboundMsg
    from app.infra.http import HttpClient, RequestResponse
    from app.protocols import BackendProtocol, InboundRequest, ServerProtocol
    from utils.errors import GatewayError

DEFAULT_SEND_URL = ZENVIA_SMS_SEND_URL


def _check_send_response(rr: RequestResponse) -> GatewayError | None:
    if not rr.ok:
        return ProviderError(f"received non 200 status: {rr.status_code}", reason="http_status_not_ok")
    body = rr.json()
    code = None
    if isinstance(body, dict) and isinstance(body.get("sendSmsResponse"), dict):
        code = body["sendSmsResponse"].get("statusCode")
    if not ZENVIA_SMS_STATUS.is_known(code) or ZENVIA_SMS_STATUS.map(code) is MsgStatusValue.ERRORED:
        return ProviderError(
            f"received non-success response from Zenvia '{code or ''}'",
            reason="provider_status_error",
        )
    return None


class ZenviaHandler:
    """Zenvia SMS com autenticação basic e uma requisição por parte."""

    channel_type = "ZV"
    name = "Zenvia"

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
        payload = decode_and_validate(ZenviaMessagePayload, request.body.reader())
        return InboundResult(msgs=(normalize_message(self.backend, channel, payload),))

    async def receive_status(self, channel: Channel, request: InboundRequest) -> InboundResult:
        payload = decode_and_validate(ZenviaStatusPayload, request.body.reader())
        return InboundResult(statuses=(normalize_status(self.backend, channel, payload),))

    async def send(self, msg: OutboundMsg) -> MsgStatus:
        username = msg.channel.config_value(CONFIG_USERNAME)
        if not username:
            raise ConfigError(f"no username set for {self.channel_type} channel")
        password = msg.channel.config_value(CONFIG_PASSWORD)
        if not password:
            raise ConfigError(f"no password set for {self.channel_type} channel")

        status = self.backend.new_status_for_id(msg.channel, msg.id, MsgStatusValue.ERRORED)
        send_part = partial(self._send_part, status, msg, (username, password))
        return await send_parts(status, build_parts(msg), send_part, policy=self._policy)

    async def _send_part(
        self,
        status: MsgStatus,
        msg: OutboundMsg,
        auth: tuple[str, str],
        part: str,
    ) -> None:
        await exchange(
            status,
            "Message Sent",
            self._http.post(
                self._send_url,
                json=build_request(msg, part),
                headers={"Content-Type": "application/json", "Accept": "application/json"},
                auth=auth,
            ),
            check=_check_send_response,
        )
