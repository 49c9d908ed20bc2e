"""Formatters de logging estruturado (JSON) e texto para desenvolvimento.

Campos obrigatórios em todo log:
- correlation_id
- service
- timestamp (asctime)
- level
- logger (name)
- message
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Campos de `extra` (channel_type, channel_uuid, reason, ...) saem como
    chaves de primeiro nível.

    Exemplo de output:
        {
            "timestamp": "2026-02-02T10:30:00+00:00",
            "asctime": "2026-02-02 10:30:00,123",
            "level": "INFO",
            "logger": "app.use_cases.channels.handle_inbound",
            "message": "webhook_accepted",
            "correlation_id": "abc-123",
            "service": "channel-gateway",
            "channel_type": "ZW"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        timestamp=True,
    )


def create_text_formatter() -> logging.Formatter:
    """Formatter legível para execução local/testes."""
    return logging.Formatter(TEXT_FORMAT)
