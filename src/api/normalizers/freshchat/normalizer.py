"""Normalizer FreshChat: um evento gera no máximo uma mensagem canônica."""

from __future__ import annotations

import logging
from datetime import UTC
from typing import TYPE_CHECKING

from app.domain.urn import FRESHCHAT_SCHEME, URN
from utils.errors import IgnoredEvent
from utils.text import join_non_empty

from .models import ImagePart, TextPart, UnsupportedPart

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain import Channel, InboundMsg
    from app.protocols import BackendProtocol

    from .models import FreshChatPayload

logger = logging.getLogger(__name__)

AGENT_ACTOR_TYPE = "agent"


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def normalize_message(
    backend: BackendProtocol,
    channel: Channel,
    payload: FreshChatPayload,
) -> InboundMsg:
    """Converte o evento em mensagem (texto das partes `text`, anexos das `image`).

    Raises:
        IgnoredEvent: Evento sem mensagem ou enviado pelo próprio agente.
        ValidationError: Identidade do remetente inválida para URN.
    """
    message = payload.data.message
    if message is None or not message.actor_id:
        raise IgnoredEvent("Ignoring request, no message")
    if message.actor_type == AGENT_ACTOR_TYPE:
        raise IgnoredEvent("Ignoring request, Agent Message")

    urn = URN.from_parts(FRESHCHAT_SCHEME, f"{message.channel_id}/{message.actor_id}")

    texts: list[str] = []
    attachments: list[str] = []
    for part in message.message_parts:
        match part:
            case TextPart(text=body):
                texts.append(body.content)
            case ImagePart(image=body):
                if body.url:
                    attachments.append(body.url)
            case UnsupportedPart():
                logger.warning(
                    "unsupported_message_part",
                    extra={"channel_uuid": channel.uuid, "part_kind": part.kind},
                )

    return backend.new_incoming_msg(
        channel,
        urn,
        join_non_empty("\n", *texts),
        attachments=tuple(attachments),
        external_id=message.id or None,
        received_on=_as_utc(message.created_time),
    )
