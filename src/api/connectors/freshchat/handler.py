"""Adapter FreshChat (FC): webhook assinado (RSA) e envio em requisição única."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any

from api.connectors.outbound import SendPolicy, exchange, send_parts
from api.normalizers.freshchat import FreshChatPayload, normalize_message
from api.payload_builders.freshchat import build_message_parts, build_request, split_user_path
from api.validators import decode_and_validate
from app.domain import CONFIG_AUTH_TOKEN, CONFIG_USERNAME, MsgStatusValue
from app.infra.crypto import SignatureVerifier
from app.protocols import InboundResult
from config.settings.freshchat import FRESHCHAT_API_URL
from utils.errors import ConfigError, ValidationError

if TYPE_CHECKING:
    from app.domain import Channel, MsgStatus, OutboundMsg
    from app.infra.http import HttpClient
    from app.protocols import BackendProtocol, InboundRequest, ServerProtocol

DEFAULT_API_URL = FRESHCHAT_API_URL
SIGNATURE_HEADER = "X-FreshChat-Signature"


class FreshChatHandler:
    """FreshChat: verifica assinatura antes do decode; uma mensagem por evento."""

    channel_type = "FC"
    name = "FreshChat"

    def __init__(
        self,
        http_client: HttpClient,
        *,
        api_url: str = DEFAULT_API_URL,
        validate_signatures: bool = True,
        policy: SendPolicy = SendPolicy.ABORT_ON_FIRST_FAILURE,
    ) -> None:
        self._http = http_client
        self._api_url = api_url.rstrip("/")
        self._policy = policy
        self.verifier = SignatureVerifier(SIGNATURE_HEADER, enabled=validate_signatures)
        self._backend: BackendProtocol | None = None

    @property
    def backend(self) -> BackendProtocol:
        if self._backend is None:
            raise RuntimeError(f"{self.name} handler used before initialize()")
        return self._backend

    def initialize(self, server: ServerProtocol) -> None:
        self._backend = server.backend
        server.add_handler_route(self, "POST", "receive", self.receive_message)

    async def receive_message(self, channel: Channel, request: InboundRequest) -> InboundResult:
        self.verifier.verify(channel, request.body.reader(), request.header(SIGNATURE_HEADER))
        payload = decode_and_validate(FreshChatPayload, request.body.reader())
        return InboundResult(msgs=(normalize_message(self.backend, channel, payload),))

    async def send(self, msg: OutboundMsg) -> MsgStatus:
        agent_id = msg.channel.config_value(CONFIG_USERNAME)
        if not agent_id:
            raise ConfigError(f"missing 'agent_id' config for {self.channel_type} channel")
        auth_token = msg.channel.config_value(CONFIG_AUTH_TOKEN)
        if not auth_token:
            raise ConfigError(f"missing 'auth_token' config for {self.channel_type} channel")

        status = self.backend.new_status_for_id(msg.channel, msg.id, MsgStatusValue.ERRORED)
        try:
            channel_id, user_id = split_user_path(msg.urn)
        except ValidationError as exc:
            status.error = exc
            return status

        message_parts = build_message_parts(msg)
        requests = [build_request(agent_id, channel_id, user_id, message_parts)] if message_parts else []
        headers = {"Content-Type": "application/json", "Authorization": f"Bearer {auth_token}"}
        send_request = partial(self._send_request, status, headers)
        return await send_parts(status, requests, send_request, policy=self._policy)

    async def _send_request(
        self,
        status: MsgStatus,
        headers: dict[str, str],
        body: dict[str, Any],
    ) -> str | None:
        rr = await exchange(
            status,
            "Message Sent",
            self._http.post(f"{self._api_url}/conversations", json=body, headers=headers),
        )
        response = rr.json()
        if isinstance(response, dict) and response.get("conversation_id"):
            return str(response["conversation_id"])
        return None
