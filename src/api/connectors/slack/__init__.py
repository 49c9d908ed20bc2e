"""Connector Slack."""

from .handler import (
    CONFIG_BOT_TOKEN,
    CONFIG_USER_TOKEN,
    CONFIG_VERIFICATION_TOKEN,
    DEFAULT_API_URL,
    SlackHandler,
)

__all__ = [
    "CONFIG_BOT_TOKEN",
    "CONFIG_USER_TOKEN",
    "CONFIG_VERIFICATION_TOKEN",
    "DEFAULT_API_URL",
    "SlackHandler",
]
