"""Normalizer Slack (Events API)."""

from .models import (
    EventCallback,
    SlackEnvelope,
    SlackFile,
    SlackFileResponse,
    SlackUserInfo,
    UrlVerification,
)
from .normalizer import (
    build_message,
    ensure_user_message,
    event_urn,
    is_direct_message,
    public_file_url,
)

__all__ = [
    "EventCallback",
    "SlackEnvelope",
    "SlackFile",
    "SlackFileResponse",
    "SlackUserInfo",
    "UrlVerification",
    "build_message",
    "ensure_user_message",
    "event_urn",
    "is_direct_message",
    "public_file_url",
]
