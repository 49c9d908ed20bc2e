"""Builder de partes outbound Zenvia WhatsApp.

Anexos são enviados primeiro, seguidos do texto dividido em blocos de até
`MAX_MSG_LENGTH` caracteres. Cada parte vira uma requisição própria.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from utils.text import split_attachment, split_text

if TYPE_CHECKING:
    from app.domain import OutboundMsg

MAX_MSG_LENGTH = 1152


def build_contents(msg: OutboundMsg) -> list[dict[str, str]]:
    """Lista ordenada de conteúdos (uma entrada por parte)."""
    contents: list[dict[str, str]] = []
    for attachment in msg.attachments:
        mime_type, url = split_attachment(attachment)
        content = {"type": "file", "fileUrl": url}
        if mime_type:
            content["fileMimeType"] = mime_type
        contents.append(content)

    for text in split_text(msg.text, MAX_MSG_LENGTH):
        contents.append({"type": "text", "text": text})
    return contents


def build_request(msg: OutboundMsg, content: dict[str, str]) -> dict[str, Any]:
    """Corpo JSON de uma parte."""
    return {
        "from": msg.channel.address.lstrip("+"),
        "to": msg.urn.path.lstrip("+"),
        "contents": [content],
    }
