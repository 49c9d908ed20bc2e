"""Status canônico de mensagem e trilha de logs de canal."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from utils.errors import GatewayError

    from .channel import Channel


class MsgStatusValue(StrEnum):
    """Valores canônicos de status."""

    WIRED = "W"
    SENT = "S"
    DELIVERED = "D"
    FAILED = "F"
    ERRORED = "E"


# Ordem de progressão para atualizações por external_id
_PROGRESSION = {
    MsgStatusValue.ERRORED: 0,
    MsgStatusValue.FAILED: 0,
    MsgStatusValue.WIRED: 1,
    MsgStatusValue.SENT: 2,
    MsgStatusValue.DELIVERED: 3,
}


def can_advance(current: MsgStatusValue, new: MsgStatusValue) -> bool:
    """Indica se `new` pode substituir `current` sem regredir.

    Status terminais de falha sempre podem ser registrados; um status de
    sucesso nunca volta para um estágio anterior (ex: delivered -> sent).
    """
    if new in (MsgStatusValue.FAILED, MsgStatusValue.ERRORED):
        return current not in (MsgStatusValue.DELIVERED,)
    return _PROGRESSION[new] >= _PROGRESSION[current]


@dataclass(frozen=True, slots=True)
class ChannelLog:
    """Registro imutável de uma troca HTTP com o provedor."""

    description: str
    channel_uuid: str
    msg_id: int | None
    method: str
    url: str
    status_code: int
    request: str
    response: str
    elapsed_ms: float
    error: str | None = None
    created_on: datetime = field(default_factory=lambda: datetime.now(UTC))

    def as_dict(self) -> dict[str, object]:
        return {
            "description": self.description,
            "channel_uuid": self.channel_uuid,
            "msg_id": self.msg_id,
            "method": self.method,
            "url": self.url,
            "status_code": self.status_code,
            "request": self.request,
            "response": self.response,
            "elapsed_ms": self.elapsed_ms,
            "error": self.error,
            "created_on": self.created_on.isoformat(),
        }


@dataclass(slots=True)
class MsgStatus:
    """Status de uma tentativa de envio ou de um webhook de status.

    Envio começa em `errored` e só é promovido a `wired` quando todas as
    partes foram aceitas. Logs são acumulados em ordem, sem mutação.
    """

    channel: Channel
    status: MsgStatusValue
    msg_id: int | None = None
    external_id: str | None = None
    error: GatewayError | None = None
    _logs: list[ChannelLog] = field(default_factory=list, repr=False)

    @property
    def logs(self) -> tuple[ChannelLog, ...]:
        return tuple(self._logs)

    def add_log(self, log: ChannelLog) -> None:
        self._logs.append(log)

    def set_status(self, status: MsgStatusValue) -> None:
        self.status = status

    def set_external_id(self, external_id: str) -> None:
        self.external_id = external_id

    def as_dict(self) -> dict[str, object]:
        """Serializa para o corpo de confirmação do webhook."""
        return {
            "type": "status",
            "channel_uuid": self.channel.uuid,
            "status": self.status.value,
            "msg_id": self.msg_id,
            "external_id": self.external_id,
        }
