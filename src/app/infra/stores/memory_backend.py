"""Backend em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.status import can_advance

from .entity_factory import EntityFactoryBackend, status_key

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain import ChannelLog, InboundMsg, MsgStatus, MsgStatusValue

logger = logging.getLogger(__name__)


class MemoryBackend(EntityFactoryBackend):
    """Guarda mensagens, status e logs em listas, na ordem de escrita."""

    def __init__(self) -> None:
        self.msgs: list[InboundMsg] = []
        self.statuses: list[MsgStatus] = []
        self.channel_logs: list[ChannelLog] = []
        self._latest: dict[tuple[str, str], MsgStatusValue] = {}

    async def write_msgs(self, msgs: Sequence[InboundMsg]) -> None:
        self.msgs.extend(msgs)

    async def write_msg_status(self, status: MsgStatus) -> None:
        key = (status.channel.uuid, status_key(status))
        current = self._latest.get(key)
        if current is not None and not can_advance(current, status.status):
            logger.info(
                "status_regression_ignored",
                extra={
                    "channel_uuid": status.channel.uuid,
                    "current_status": current.value,
                    "new_status": status.status.value,
                },
            )
            return
        self._latest[key] = status.status
        self.statuses.append(status)
        self.channel_logs.extend(status.logs)

    async def write_channel_logs(self, logs: Sequence[ChannelLog]) -> None:
        self.channel_logs.extend(logs)

    def latest_status(self, channel_uuid: str, *, external_id: str) -> MsgStatusValue | None:
        """Último status aceito para o id do provedor."""
        return self._latest.get((channel_uuid, f"ext:{external_id}"))
