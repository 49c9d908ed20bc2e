"""Protocolo do servidor HTTP externo (registro de rotas e canais)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from app.domain import Channel

    from .backend import BackendProtocol
    from .handler import ChannelHandlerProtocol
    from .models import InboundRequest, InboundResult

    RouteHandler = Callable[[Channel, InboundRequest], Awaitable[InboundResult]]


class ServerProtocol(Protocol):
    """Capacidades do servidor consumidas pelos adapters."""

    @property
    def backend(self) -> BackendProtocol: ...

    def add_handler_route(
        self,
        handler: ChannelHandlerProtocol,
        method: str,
        action: str,
        route: RouteHandler,
    ) -> None: ...

    def get_channel(self, channel_type: str, channel_uuid: str) -> Channel: ...
