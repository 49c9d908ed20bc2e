"""Agregador de settings do gateway de canais.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BackendKind,
    BackendSettings,
    Environment,
    GatewaySettings,
    get_backend_settings,
    get_gateway_settings,
)

# Channel-specific settings
from config.settings.freshchat import (
    FRESHCHAT_API_URL,
    FreshChatSettings,
    get_freshchat_settings,
)
from config.settings.slack import (
    SLACK_API_URL,
    SlackSettings,
    get_slack_settings,
)
from config.settings.zenvia import (
    ZENVIA_SMS_SEND_URL,
    ZENVIA_WHATSAPP_SEND_URL,
    ZenviaSettings,
    get_zenvia_settings,
)

__all__ = [
    # Constants
    "FRESHCHAT_API_URL",
    "SLACK_API_URL",
    "ZENVIA_SMS_SEND_URL",
    "ZENVIA_WHATSAPP_SEND_URL",
    # Base
    "BackendKind",
    "BackendSettings",
    "Environment",
    # Channels
    "FreshChatSettings",
    "GatewaySettings",
    "SlackSettings",
    "ZenviaSettings",
    "get_backend_settings",
    "get_freshchat_settings",
    "get_gateway_settings",
    "get_slack_settings",
    "get_zenvia_settings",
]
