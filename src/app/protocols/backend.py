"""Protocolo do backend: construção e persistência de entidades canônicas.

Interface leve (ABC) dependida pelos adapters; a implementação concreta
(armazenamento, idempotência, fila) fica fora desta camada.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from app.domain import URN, Channel, ChannelLog, InboundMsg, MsgStatus, MsgStatusValue


class BackendProtocol(ABC):
    """Contrato mínimo do backend consumido pelos adapters."""

    @abstractmethod
    def new_incoming_msg(
        self,
        channel: Channel,
        urn: URN,
        text: str,
        *,
        attachments: Sequence[str] = (),
        external_id: str | None = None,
        received_on: datetime | None = None,
        contact_name: str | None = None,
    ) -> InboundMsg:
        """Cria mensagem inbound canônica."""

    @abstractmethod
    def new_status_for_id(
        self,
        channel: Channel,
        msg_id: int,
        status: MsgStatusValue,
    ) -> MsgStatus:
        """Cria status para uma mensagem outbound identificada pelo id interno."""

    @abstractmethod
    def new_status_for_external_id(
        self,
        channel: Channel,
        external_id: str,
        status: MsgStatusValue,
    ) -> MsgStatus:
        """Cria status identificado pelo id de correlação do provedor."""

    @abstractmethod
    async def write_msgs(self, msgs: Sequence[InboundMsg]) -> None:
        """Persiste mensagens inbound (na ordem recebida)."""

    @abstractmethod
    async def write_msg_status(self, status: MsgStatus) -> None:
        """Persiste atualização de status."""

    @abstractmethod
    async def write_channel_logs(self, logs: Sequence[ChannelLog]) -> None:
        """Persiste logs de canal não associados a um status."""
