"""Normalizer Slack: filtros de relevância, URN e montagem da mensagem.

Consultas à Web API (nome do contato, URLs públicas de arquivos) são feitas
pelo handler; aqui ficam apenas as regras puras do evento.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.domain.urn import SLACK_SCHEME, URN
from utils.errors import IgnoredEvent

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain import Channel, InboundMsg
    from app.protocols import BackendProtocol

    from .models import EventCallback, SlackEvent, SlackFile

CHANNEL_TYPE_CHANNEL = "channel"
CHANNEL_TYPE_IM = "im"


def ensure_user_message(callback: EventCallback) -> SlackEvent:
    """Retorna o evento se for mensagem de usuário.

    Raises:
        IgnoredEvent: Evento que não é mensagem ou foi enviado por bot.
    """
    event = callback.event
    if "message" not in event.type or event.bot_id:
        raise IgnoredEvent("Ignoring request, no message")
    return event


def is_direct_message(event: SlackEvent) -> bool:
    return event.channel_type == CHANNEL_TYPE_IM


def event_urn(event: SlackEvent, display: str = "") -> URN:
    """URN do remetente: canal público usa o id do canal; DM usa o id do usuário.

    Raises:
        ValidationError: Tipo de canal sem identidade (path vazio).
    """
    if event.channel_type == CHANNEL_TYPE_CHANNEL:
        path = event.channel
    elif event.channel_type == CHANNEL_TYPE_IM:
        path = event.user
    else:
        path = ""
    return URN.from_parts(SLACK_SCHEME, path, display)


def public_file_url(file: SlackFile) -> str:
    """URL de download com o segredo do permalink público."""
    pub_secret = file.permalink_public.split("-")[-1]
    return f"{file.url_private_download}?pub_secret={pub_secret}"


def build_message(
    backend: BackendProtocol,
    channel: Channel,
    callback: EventCallback,
    *,
    contact_name: str = "",
    attachments: Sequence[str] = (),
) -> InboundMsg:
    event = callback.event
    received_on = datetime.fromtimestamp(callback.event_time, UTC) if callback.event_time else None
    return backend.new_incoming_msg(
        channel,
        event_urn(event, contact_name),
        event.text,
        attachments=tuple(attachments),
        external_id=callback.event_id or None,
        received_on=received_on,
        contact_name=contact_name or None,
    )
