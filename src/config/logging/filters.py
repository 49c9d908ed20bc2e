"""Filters de logging para injeção de contexto e remoção de segredos.

Campos injetados:
- correlation_id: ID de rastreamento do webhook/envio
- service: Nome do serviço (ex: channel-gateway)

Logs nunca carregam texto de mensagem, tokens ou credenciais de canal;
`RedactSecretsFilter` mascara chaves sensíveis passadas por engano via `extra`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "[REDACTED]"

DEFAULT_SENSITIVE_KEYS = frozenset(
    {
        "api_key",
        "auth_token",
        "authorization",
        "bot_token",
        "password",
        "secret",
        "text",
        "token",
        "user_token",
        "verification_token",
    }
)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id passado explicitamente via `extra` tem prioridade
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class RedactSecretsFilter(logging.Filter):
    """Mascara atributos sensíveis do record (nunca descarta o log)."""

    def __init__(self, sensitive_keys: Iterable[str] = DEFAULT_SENSITIVE_KEYS) -> None:
        super().__init__()
        self._keys = frozenset(key.lower() for key in sensitive_keys)

    def filter(self, record: logging.LogRecord) -> bool:
        for key in list(vars(record)):
            if key.lower() in self._keys and getattr(record, key):
                setattr(record, key, REDACTED)
        return True
