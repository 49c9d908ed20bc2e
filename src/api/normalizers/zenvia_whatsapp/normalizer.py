"""Normalizer Zenvia WhatsApp: evento de webhook para mensagens canônicas.

Um evento com N conteúdos gera N mensagens (fan-out), todas com a mesma URN,
external id, data de recebimento e nome de contato.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from api.status_mappers import ZENVIA_WHATSAPP_STATUS
from app.domain.urn import new_whatsapp_urn
from utils.errors import IgnoredEvent, ValidationError

from .models import (
    FileContent,
    LocationContent,
    PayloadContent,
    TextContent,
    UnsupportedContent,
)

if TYPE_CHECKING:
    from app.domain import Channel, InboundMsg, MsgStatus
    from app.protocols import BackendProtocol

    from .models import Content, ZenviaWhatsAppPayload, ZenviaWhatsAppStatusPayload

logger = logging.getLogger(__name__)

# 2017-05-03T06:04:45Z
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def parse_timestamp(value: str) -> datetime:
    """Converte timestamp do evento para datetime UTC.

    Raises:
        ValidationError: Se o formato não for `YYYY-MM-DDTHH:MM:SSZ`.
    """
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=UTC)
    except ValueError as exc:
        raise ValidationError(f"invalid date format: {value}", reason="invalid_timestamp") from exc


def content_to_parts(content: Content) -> tuple[str, str] | None:
    """Mapeia um conteúdo para (texto, anexo); None para tipo não suportado."""
    match content:
        case TextContent(text=text):
            return text, ""
        case PayloadContent(payload=payload):
            return payload, ""
        case FileContent(file_url=file_url):
            return "", file_url
        case LocationContent(latitude=latitude, longitude=longitude):
            return "", f"geo:{latitude:f},{longitude:f}"
        case UnsupportedContent():
            return None


def normalize_messages(
    backend: BackendProtocol,
    channel: Channel,
    payload: ZenviaWhatsAppPayload,
) -> list[InboundMsg]:
    """Constrói uma mensagem canônica por conteúdo suportado.

    Raises:
        ValidationError: Tipo de evento, timestamp ou remetente inválidos.
        IgnoredEvent: Evento de saída ou sem conteúdo suportado.
    """
    if payload.type.upper() != "MESSAGE":
        raise ValidationError(f"unsupported event type: {payload.type}", reason="unsupported_event_type")

    received_on = parse_timestamp(payload.timestamp)
    message = payload.message

    if message.direction.upper() != "IN":
        raise IgnoredEvent("ignoring request, not incoming messages")

    urn = new_whatsapp_urn(message.from_)
    contact_name = payload.visitor.name or None

    msgs: list[InboundMsg] = []
    for content in message.contents:
        parts = content_to_parts(content)
        if parts is None:
            logger.warning(
                "unsupported_content_type",
                extra={"channel_uuid": channel.uuid, "content_type": content.type},
            )
            continue
        text, attachment = parts
        msgs.append(
            backend.new_incoming_msg(
                channel,
                urn,
                text,
                attachments=(attachment,) if attachment else (),
                external_id=message.id,
                received_on=received_on,
                contact_name=contact_name,
            )
        )

    if not msgs:
        raise IgnoredEvent("ignoring request, no supported content")
    return msgs


def normalize_status(
    backend: BackendProtocol,
    channel: Channel,
    payload: ZenviaWhatsAppStatusPayload,
) -> MsgStatus:
    """Mapeia evento de status para MsgStatus keyed pelo id do provedor.

    Raises:
        ValidationError: Se o tipo do evento não for `MESSAGE_STATUS`.
    """
    if payload.type.upper() != "MESSAGE_STATUS":
        raise ValidationError(f"unsupported event type: {payload.type}", reason="unsupported_event_type")

    value = ZENVIA_WHATSAPP_STATUS.map(payload.message_status.code)
    return backend.new_status_for_external_id(channel, payload.message_id, value)
