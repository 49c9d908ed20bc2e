"""Modelo canônico compartilhado por todos os adapters de canal."""

from .channel import (
    CONFIG_API_KEY,
    CONFIG_AUTH_TOKEN,
    CONFIG_PASSWORD,
    CONFIG_SECRET,
    CONFIG_USERNAME,
    Channel,
)
from .msg import InboundMsg, OutboundMsg
from .status import ChannelLog, MsgStatus, MsgStatusValue, can_advance
from .urn import (
    FRESHCHAT_SCHEME,
    SLACK_SCHEME,
    TEL_SCHEME,
    URN,
    WHATSAPP_SCHEME,
    new_tel_urn_for_country,
    new_whatsapp_urn,
)

__all__ = [
    "CONFIG_API_KEY",
    "CONFIG_AUTH_TOKEN",
    "CONFIG_PASSWORD",
    "CONFIG_SECRET",
    "CONFIG_USERNAME",
    "FRESHCHAT_SCHEME",
    "SLACK_SCHEME",
    "TEL_SCHEME",
    "URN",
    "WHATSAPP_SCHEME",
    "Channel",
    "ChannelLog",
    "InboundMsg",
    "MsgStatus",
    "MsgStatusValue",
    "OutboundMsg",
    "can_advance",
    "new_tel_urn_for_country",
    "new_whatsapp_urn",
]
