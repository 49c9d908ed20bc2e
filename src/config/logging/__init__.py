"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="channel-gateway")
    logger = get_logger(__name__)
    logger.info("outbound_wired", extra={"channel_type": "SL", "msg_id": 42})

Campos obrigatórios em todo log: correlation_id, service, level, logger,
message, asctime. Sem PII e sem credenciais.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, RedactSecretsFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_text_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    "RedactSecretsFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
]
