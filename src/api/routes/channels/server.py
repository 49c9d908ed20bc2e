"""Implementação do `ServerProtocol` usada pelos adapters no startup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.protocols import ServerProtocol

if TYPE_CHECKING:
    from app.domain import Channel
    from app.infra.stores import ChannelRepository
    from app.protocols import BackendProtocol, ChannelHandlerProtocol
    from app.protocols.server import RouteHandler
    from app.registry import AdapterRegistry


class ChannelServer(ServerProtocol):
    """Liga adapters ao registro de rotas, ao repositório de canais e ao backend.

    Rotas ficam no `AdapterRegistry`; o endpoint HTTP genérico resolve
    (tipo, método, ação) por lookup, sem uma rota FastAPI por adapter.
    """

    def __init__(
        self,
        registry: AdapterRegistry,
        channels: ChannelRepository,
        backend: BackendProtocol,
    ) -> None:
        self._registry = registry
        self._channels = channels
        self._backend = backend

    @property
    def backend(self) -> BackendProtocol:
        return self._backend

    @property
    def registry(self) -> AdapterRegistry:
        return self._registry

    def add_handler_route(
        self,
        handler: ChannelHandlerProtocol,
        method: str,
        action: str,
        route: RouteHandler,
    ) -> None:
        self._registry.add_route(handler, method, action, route)

    def get_channel(self, channel_type: str, channel_uuid: str) -> Channel:
        return self._channels.get(channel_type, channel_uuid)
