"""Partes outbound Slack: texto via `chat.postMessage`, anexos via `files.upload`."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

from utils.text import split_attachment

if TYPE_CHECKING:
    from app.domain import OutboundMsg


@dataclass(frozen=True, slots=True)
class TextPart:
    text: str


@dataclass(frozen=True, slots=True)
class FilePart:
    url: str
    mime_type: str = ""

    @property
    def filename(self) -> str:
        return posixpath.basename(urlsplit(self.url).path) or "file"


SlackPart = TextPart | FilePart


def build_parts(msg: OutboundMsg) -> list[SlackPart]:
    """Texto primeiro (mensagem única), depois um upload por anexo."""
    parts: list[SlackPart] = []
    if msg.text:
        parts.append(TextPart(msg.text))
    for attachment in msg.attachments:
        mime_type, url = split_attachment(attachment)
        parts.append(FilePart(url=url, mime_type=mime_type))
    return parts


def build_post_message(msg: OutboundMsg, part: TextPart) -> dict[str, Any]:
    return {"channel": msg.urn.path, "text": part.text}


def build_upload_form(msg: OutboundMsg, part: FilePart) -> dict[str, str]:
    return {"filename": part.filename, "channels": msg.urn.path}
