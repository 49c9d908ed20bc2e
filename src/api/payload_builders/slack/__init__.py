"""Payload builders Slack."""

from .builder import (
    FilePart,
    SlackPart,
    TextPart,
    build_parts,
    build_post_message,
    build_upload_form,
)

__all__ = [
    "FilePart",
    "SlackPart",
    "TextPart",
    "build_parts",
    "build_post_message",
    "build_upload_form",
]
