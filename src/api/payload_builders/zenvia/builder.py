"""Builder outbound Zenvia SMS: texto e URLs de anexos em blocos de 150."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from utils.text import join_non_empty, split_attachment, split_text

if TYPE_CHECKING:
    from app.domain import OutboundMsg

MAX_MSG_LENGTH = 150


def build_parts(msg: OutboundMsg) -> list[str]:
    """Texto seguido das URLs dos anexos (uma por linha), dividido em partes."""
    urls = [split_attachment(attachment)[1] for attachment in msg.attachments]
    return split_text(join_non_empty("\n", msg.text, *urls), MAX_MSG_LENGTH)


def build_request(msg: OutboundMsg, part: str) -> dict[str, Any]:
    return {
        "sendSmsRequest": {
            "from": "Sender",
            "to": msg.urn.path.lstrip("+"),
            "schedule": "",
            "msg": part,
            "callbackOption": "1",
            "id": str(msg.id),
            "aggregateId": "",
        }
    }
