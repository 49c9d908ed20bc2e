"""Contrato comum dos adapters de canal (um tipo concreto por provedor)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain import MsgStatus, OutboundMsg

    from .server import ServerProtocol


class ChannelHandlerProtocol(Protocol):
    """Capacidades de um adapter: registrar rotas e enviar mensagens.

    Attributes:
        channel_type: Código de duas letras (ex: "FC")
        name: Nome legível do provedor
    """

    channel_type: str
    name: str

    def initialize(self, server: ServerProtocol) -> None:
        """Registra rotas inbound no servidor e guarda referência ao backend."""
        ...

    async def send(self, msg: OutboundMsg) -> MsgStatus:
        """Envia mensagem outbound e devolve o status agregado.

        Raises:
            ConfigError: Credencial obrigatória ausente (nenhuma chamada de rede).
        """
        ...
