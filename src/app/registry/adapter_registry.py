"""Registro de adapters: código de duas letras -> adapter e suas rotas.

Populado uma única vez no startup a partir de uma lista explícita de
adapters; depois de `initialize` fica selado e só atende leituras.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import TYPE_CHECKING

from utils.errors import ChannelNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from app.protocols import ChannelHandlerProtocol, ServerProtocol
    from app.protocols.server import RouteHandler

logger = logging.getLogger(__name__)

_CHANNEL_TYPE_RE = re.compile(r"^[A-Z]{2}$")


class RegistrySealedError(RuntimeError):
    """Tentativa de registrar adapter ou rota depois do startup."""


class AdapterRegistry:
    """Tabela somente-leitura de adapters e rotas por tipo de canal."""

    def __init__(self, handlers: Iterable[ChannelHandlerProtocol] = ()) -> None:
        self._handlers: dict[str, ChannelHandlerProtocol] = {}
        self._routes: dict[tuple[str, str, str], RouteHandler] = {}
        self._sealed = False
        for handler in handlers:
            self.register(handler)

    def _ensure_open(self) -> None:
        if self._sealed:
            raise RegistrySealedError("adapter registry is sealed after initialize()")

    def register(self, handler: ChannelHandlerProtocol) -> None:
        """Adiciona adapter ao registro.

        Raises:
            RegistrySealedError: Registro já inicializado.
            ValueError: Código fora do padrão ou duplicado.
        """
        self._ensure_open()
        code = handler.channel_type
        if not _CHANNEL_TYPE_RE.match(code):
            raise ValueError(f"channel type must be two upper-case letters: {code!r}")
        if code in self._handlers:
            raise ValueError(f"duplicate channel type: {code}")
        self._handlers[code] = handler

    def add_route(
        self,
        handler: ChannelHandlerProtocol,
        method: str,
        action: str,
        route: RouteHandler,
    ) -> None:
        """Associa rota (método, ação) a um adapter registrado."""
        self._ensure_open()
        if self._handlers.get(handler.channel_type) is not handler:
            raise ValueError(f"handler not registered: {handler.channel_type}")
        key = (handler.channel_type, method.upper(), action)
        if key in self._routes:
            raise ValueError(f"duplicate route: {method.upper()} {handler.channel_type}/{action}")
        self._routes[key] = route

    def initialize(self, server: ServerProtocol) -> None:
        """Deixa cada adapter registrar suas rotas e sela o registro."""
        self._ensure_open()
        for handler in self._handlers.values():
            handler.initialize(server)
        self._sealed = True
        logger.info(
            "adapter_registry_initialized",
            extra={
                "channel_types": sorted(self._handlers),
                "route_count": len(self._routes),
            },
        )

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def handlers(self) -> MappingProxyType[str, ChannelHandlerProtocol]:
        return MappingProxyType(self._handlers)

    def routes(self) -> list[tuple[str, str, str]]:
        """Rotas registradas como (tipo, método, ação), em ordem estável."""
        return sorted(self._routes)

    def get(self, channel_type: str) -> ChannelHandlerProtocol:
        """Adapter do tipo de canal (case-insensitive).

        Raises:
            ChannelNotFoundError: Tipo de canal não registrado.
        """
        handler = self._handlers.get(channel_type.upper())
        if handler is None:
            raise ChannelNotFoundError(
                f"unknown channel type: {channel_type}", reason="unknown_channel_type"
            )
        return handler

    def route(self, channel_type: str, method: str, action: str) -> RouteHandler:
        """Função de rota do adapter.

        Raises:
            ChannelNotFoundError: Tipo de canal ou ação sem rota.
        """
        route = self._routes.get((channel_type.upper(), method.upper(), action))
        if route is None:
            raise ChannelNotFoundError(
                f"no route for {method.upper()} {channel_type.upper()}/{action}",
                reason="route_not_found",
            )
        return route

    def __contains__(self, channel_type: object) -> bool:
        return isinstance(channel_type, str) and channel_type.upper() in self._handlers

    def __iter__(self) -> Iterator[ChannelHandlerProtocol]:
        return iter(self._handlers.values())

    def __len__(self) -> int:
        return len(self._handlers)
