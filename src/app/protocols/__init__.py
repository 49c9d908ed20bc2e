"""Protocolos e contratos do core da aplicação."""

from .backend import BackendProtocol
from .handler import ChannelHandlerProtocol
from .models import InboundRequest, InboundResult, ReplayableBody, WebhookResponse
from .server import ServerProtocol

__all__ = [
    "BackendProtocol",
    "ChannelHandlerProtocol",
    "InboundRequest",
    "InboundResult",
    "ReplayableBody",
    "ServerProtocol",
    "WebhookResponse",
]
