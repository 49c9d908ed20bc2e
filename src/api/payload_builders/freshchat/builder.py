"""Builder outbound FreshChat: conversa com uma mensagem do agente."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from utils.errors import ValidationError
from utils.text import split_attachment

if TYPE_CHECKING:
    from app.domain import URN, OutboundMsg


def split_user_path(urn: URN) -> tuple[str, str]:
    """Separa path `<channel_id>/<user_id>` da URN de destino.

    Raises:
        ValidationError: Path fora do formato esperado.
    """
    channel_id, sep, user_id = urn.path.partition("/")
    if not sep or not channel_id or not user_id or "/" in user_id:
        raise ValidationError("freshchat urn path must be <channel_id>/<user_id>", reason="invalid_urn")
    return channel_id, user_id


def build_message_parts(msg: OutboundMsg) -> list[dict[str, Any]]:
    parts: list[dict[str, Any]] = []
    if msg.text:
        parts.append({"text": {"content": msg.text}})
    for attachment in msg.attachments:
        _, url = split_attachment(attachment)
        parts.append({"image": {"url": url}})
    return parts


def build_request(
    agent_id: str,
    channel_id: str,
    user_id: str,
    message_parts: list[dict[str, Any]],
) -> dict[str, Any]:
    return {
        "messages": [
            {
                "message_parts": message_parts,
                "actor_id": agent_id,
                "actor_type": "agent",
            }
        ],
        "channel_id": channel_id,
        "users": [{"id": user_id}],
    }
