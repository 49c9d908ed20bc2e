"""Modelos de fronteira entre adapters e o servidor HTTP externo."""

from __future__ import annotations

import io
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain import InboundMsg, MsgStatus


class ReplayableBody:
    """Corpo de requisição lido uma única vez para um buffer próprio.

    Cada chamada a `reader()` devolve um cursor independente sobre os mesmos
    bytes, permitindo que verificação de assinatura e decode JSON consumam
    exatamente o mesmo conteúdo.
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)

    def reader(self) -> io.BytesIO:
        return io.BytesIO(self._data)

    @property
    def raw(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)


@dataclass(frozen=True, slots=True)
class InboundRequest:
    """Requisição inbound já bufferizada, independente de framework.

    Headers devem ser informados com nomes em minúsculas.
    """

    method: str
    path: str
    body: ReplayableBody
    headers: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "headers",
            MappingProxyType({k.lower(): v for k, v in self.headers.items()}),
        )
        object.__setattr__(self, "query", MappingProxyType(dict(self.query)))

    def header(self, name: str) -> str | None:
        return self.headers.get(name.lower())


@dataclass(frozen=True, slots=True)
class WebhookResponse:
    """Resposta HTTP devolvida ao provedor."""

    status_code: int
    body: Any
    media_type: str = "application/json"


@dataclass(frozen=True, slots=True)
class InboundResult:
    """Resultado de um handler inbound.

    Attributes:
        msgs: Mensagens a persistir (zero, uma ou várias)
        statuses: Status a persistir
        response: Resposta customizada (ex: desafio de verificação de URL)
    """

    msgs: tuple[InboundMsg, ...] = ()
    statuses: tuple[MsgStatus, ...] = ()
    response: WebhookResponse | None = None
