"""Settings do backend de persistência (mensagens, status, logs)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import GatewaySettings

BackendKind = Literal["memory", "redis"]


@dataclass(frozen=True)
class BackendSettings:
    """Configurações do backend.

    Attributes:
        kind: Implementação (memory|redis)
        status_ttl_seconds: TTL do último status por mensagem (redis)
    """

    kind: BackendKind = "memory"
    status_ttl_seconds: int = 7 * 24 * 3600

    def validate(self, base: GatewaySettings) -> list[str]:
        """Valida configurações do backend.

        Args:
            base: GatewaySettings para verificar ambiente e REDIS_URL.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.kind not in {"memory", "redis"}:
            errors.append(f"BACKEND inválido: {self.kind}")

        if self.kind == "memory" and not base.is_development:
            errors.append("BACKEND=memory proibido em staging/production. Use Redis.")

        if self.kind == "redis" and not base.redis_url:
            errors.append("BACKEND=redis requer REDIS_URL configurado")

        if self.status_ttl_seconds <= 0:
            errors.append("STATUS_TTL_SECONDS deve ser > 0")

        return errors


def _load_backend_from_env() -> BackendSettings:
    """Carrega BackendSettings de variáveis de ambiente."""
    kind_str = os.getenv("BACKEND", "memory").lower()
    kind: BackendKind = "redis" if kind_str == "redis" else "memory"
    return BackendSettings(
        kind=kind,
        status_ttl_seconds=int(os.getenv("STATUS_TTL_SECONDS", str(7 * 24 * 3600))),
    )


@lru_cache(maxsize=1)
def get_backend_settings() -> BackendSettings:
    """Retorna instância cacheada de BackendSettings."""
    return _load_backend_from_env()
