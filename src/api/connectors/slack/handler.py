"""Adapter Slack (SL): Events API inbound e Web API outbound.

Inbound consulta `users.info` (nome do contato em DMs) e
`files.sharedPublicURL` (URLs públicas de anexos); logs dessas consultas vão
direto para o backend, já que não existe status associado.
"""

from __future__ import annotations

import hmac
import logging
from functools import partial
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from api.connectors.outbound import SendPolicy, channel_log_from_rr, exchange, send_parts
from api.normalizers.slack import (
    EventCallback,
    SlackEnvelope,
    SlackFileResponse,
    SlackUserInfo,
    UrlVerification,
    build_message,
    ensure_user_message,
    is_direct_message,
    public_file_url,
)
from api.payload_builders.slack import (
    FilePart,
    TextPart,
    build_parts,
    build_post_message,
    build_upload_form,
)
from api.validators import decode_and_validate
from app.domain import MsgStatusValue
from app.protocols import InboundResult, WebhookResponse
from config.settings.slack import SLACK_API_URL
from utils.errors import ConfigError, ForbiddenError, NetworkError, ProviderError

if TYPE_CHECKING:
    from app.domain import Channel, MsgStatus, OutboundMsg
    from app.infra.http import HttpClient, RequestResponse
    from app.protocols import BackendProtocol, InboundRequest, ServerProtocol
    from utils.errors import GatewayError

    from api.normalizers.slack import SlackFile
    from api.payload_builders.slack import SlackPart

logger = logging.getLogger(__name__)

DEFAULT_API_URL = SLACK_API_URL

CONFIG_BOT_TOKEN = "bot_token"
CONFIG_USER_TOKEN = "user_token"
CONFIG_VERIFICATION_TOKEN = "verification_token"

ERR_ALREADY_PUBLIC = "already_public"
ERR_PUBLIC_VIDEO_NOT_ALLOWED = "public_video_not_allowed"


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def _parse(model: type[BaseModel], rr: RequestResponse) -> BaseModel | None:
    body = rr.json()
    if not isinstance(body, dict):
        return None
    try:
        return model.model_validate(body)
    except PydanticValidationError:
        return None


def _check_slack_ok(rr: RequestResponse) -> GatewayError | None:
    """Parte só é aceita com HTTP 2xx e `ok: true` no corpo."""
    if not rr.ok:
        return ProviderError(f"received non 200 status: {rr.status_code}", reason="http_status_not_ok")
    body = rr.json()
    if not isinstance(body, dict) or body.get("ok") is not True:
        error = body.get("error") if isinstance(body, dict) else None
        return ProviderError(f"slack api error: {error or 'invalid response'}", reason="slack_api_error")
    return None


class SlackHandler:
    """Slack: desafio de URL, mensagens de usuários e envio de texto/arquivos."""

    channel_type = "SL"
    name = "Slack"

    def __init__(
        self,
        http_client: HttpClient,
        *,
        api_url: str = DEFAULT_API_URL,
        policy: SendPolicy = SendPolicy.ABORT_ON_FIRST_FAILURE,
    ) -> None:
        self._http = http_client
        self._api_url = api_url.rstrip("/")
        self._policy = policy
        self._backend: BackendProtocol | None = None

    @property
    def backend(self) -> BackendProtocol:
        if self._backend is None:
            raise RuntimeError(f"{self.name} handler used before initialize()")
        return self._backend

    def initialize(self, server: ServerProtocol) -> None:
        self._backend = server.backend
        server.add_handler_route(self, "POST", "receive", self.receive_event)

    # ──────────────────────────────────────────────────────────────
    # Inbound
    # ──────────────────────────────────────────────────────────────

    async def receive_event(self, channel: Channel, request: InboundRequest) -> InboundResult:
        envelope = decode_and_validate(SlackEnvelope, request.body.reader()).root
        match envelope:
            case UrlVerification():
                return self._answer_challenge(channel, envelope)
            case EventCallback():
                return await self._receive_message(channel, envelope)

    def _answer_challenge(self, channel: Channel, payload: UrlVerification) -> InboundResult:
        expected = channel.config_value(CONFIG_VERIFICATION_TOKEN)
        if not expected or not hmac.compare_digest(expected.encode(), payload.token.encode()):
            raise ForbiddenError(
                f"wrong verification token for channel: {channel.uuid}",
                reason="invalid_verification_token",
            )
        return InboundResult(
            response=WebhookResponse(status_code=200, body=payload.challenge, media_type="text/plain")
        )

    async def _receive_message(self, channel: Channel, callback: EventCallback) -> InboundResult:
        event = ensure_user_message(callback)

        contact_name = ""
        if is_direct_message(event):
            contact_name = await self._lookup_contact_name(channel, event.user)

        attachments: list[str] = []
        for file in event.files:
            url = await self._resolve_file(channel, file)
            if url:
                attachments.append(url)

        msg = build_message(
            self.backend,
            channel,
            callback,
            contact_name=contact_name,
            attachments=attachments,
        )
        return InboundResult(msgs=(msg,))

    async def _lookup_contact_name(self, channel: Channel, user_id: str) -> str:
        """Nome real do usuário via `users.info`.

        Raises:
            NetworkError: Falha de transporte.
            ProviderError: Resposta ilegível.
        """
        description = "Get User info"
        try:
            rr = await self._http.get(
                f"{self._api_url}/users.info",
                params={"user": user_id},
                headers=_bearer(channel.config_value(CONFIG_BOT_TOKEN)),
            )
        except NetworkError as exc:
            await self._write_lookup_log(channel, description, exc.request_response, exc)
            raise

        info = _parse(SlackUserInfo, rr)
        if info is None:
            error = ProviderError("unable to parse user info", reason="invalid_user_info")
            await self._write_lookup_log(channel, description, rr, error)
            raise error
        if not info.ok:
            logger.info(
                "slack_user_info_unavailable",
                extra={"channel_uuid": channel.uuid, "reason": info.error or "not_ok"},
            )
            return ""
        return info.user.real_name

    async def _resolve_file(self, channel: Channel, file: SlackFile) -> str | None:
        """URL pública do arquivo; None (com log) quando não for possível."""
        description = "File Resolving"
        try:
            rr = await self._http.post(
                f"{self._api_url}/files.sharedPublicURL",
                json={"file": file.id},
                headers={
                    "Content-Type": "application/json; charset=utf-8",
                    **_bearer(channel.config_value(CONFIG_USER_TOKEN)),
                },
            )
        except NetworkError as exc:
            await self._write_lookup_log(channel, description, exc.request_response, exc)
            self._log_file_skipped(channel, exc)
            return None

        response = _parse(SlackFileResponse, rr)
        if response is None:
            error = ProviderError("unable to parse file response", reason="invalid_file_response")
            self._log_file_skipped(channel, error)
            return None

        current = response.file
        if not response.ok:
            if response.error != ERR_ALREADY_PUBLIC:
                if response.error == ERR_PUBLIC_VIDEO_NOT_ALLOWED:
                    message = "public sharing of videos is not available for a free instance of Slack"
                else:
                    message = f"couldn't resolve file: {response.error}"
                error = ProviderError(message, reason=response.error or "file_not_resolved")
                await self._write_lookup_log(channel, description, rr, error)
                self._log_file_skipped(channel, error)
                return None
            current = file
        return public_file_url(current)

    def _log_file_skipped(self, channel: Channel, error: GatewayError) -> None:
        logger.warning(
            "slack_file_skipped",
            extra={"channel_uuid": channel.uuid, "reason": error.reason},
        )

    async def _write_lookup_log(
        self,
        channel: Channel,
        description: str,
        rr: RequestResponse | None,
        error: GatewayError,
    ) -> None:
        if rr is None:
            return
        await self.backend.write_channel_logs([channel_log_from_rr(description, channel, None, rr, error)])

    # ──────────────────────────────────────────────────────────────
    # Outbound
    # ──────────────────────────────────────────────────────────────

    async def send(self, msg: OutboundMsg) -> MsgStatus:
        bot_token = msg.channel.config_value(CONFIG_BOT_TOKEN)
        if not bot_token:
            raise ConfigError(f"missing bot token for {self.channel_type} channel")

        status = self.backend.new_status_for_id(msg.channel, msg.id, MsgStatusValue.ERRORED)
        send_part = partial(self._send_part, status, msg, bot_token)
        return await send_parts(status, build_parts(msg), send_part, policy=self._policy)

    async def _send_part(
        self,
        status: MsgStatus,
        msg: OutboundMsg,
        bot_token: str,
        part: SlackPart,
    ) -> str | None:
        match part:
            case TextPart():
                rr = await exchange(
                    status,
                    "Message Sent",
                    self._http.post(
                        f"{self._api_url}/chat.postMessage",
                        json=build_post_message(msg, part),
                        headers={
                            "Content-Type": "application/json; charset=utf-8",
                            **_bearer(bot_token),
                        },
                    ),
                    check=_check_slack_ok,
                )
                ts = rr.json().get("ts")
                return str(ts) if ts else None
            case FilePart():
                media = await exchange(status, "Fetching media", self._http.get(part.url))
                await exchange(
                    status,
                    "Uploading file to Slack",
                    self._http.post(
                        f"{self._api_url}/files.upload",
                        data=build_upload_form(msg, part),
                        files={"file": (part.filename, media.response_body)},
                        headers=_bearer(bot_token),
                    ),
                    check=_check_slack_ok,
                )
                return None
