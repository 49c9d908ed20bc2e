"""Tabela de tradução de status do provedor para o status canônico."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from app.domain.status import MsgStatusValue


def _identity(code: str) -> str:
    return code


@dataclass(frozen=True, slots=True)
class StatusMapper:
    """Lookup puro código -> status canônico.

    Código ausente da tabela resulta em `errored`: status desconhecido nunca
    é resolvido como sucesso.

    Attributes:
        provider: Nome do provedor (para logs)
        table: Mapeamento código -> status
        normalize: Normalização aplicada ao código antes do lookup
    """

    provider: str
    table: Mapping[str, MsgStatusValue]
    normalize: Callable[[str], str] = field(default=_identity)

    def __post_init__(self) -> None:
        object.__setattr__(self, "table", MappingProxyType(dict(self.table)))

    def map(self, code: str | int | None) -> MsgStatusValue:
        if code is None:
            return MsgStatusValue.ERRORED
        return self.table.get(self.normalize(str(code)), MsgStatusValue.ERRORED)

    def is_known(self, code: str | int | None) -> bool:
        return code is not None and self.normalize(str(code)) in self.table
