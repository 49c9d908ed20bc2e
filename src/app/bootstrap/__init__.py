"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta adapters, backend e repositório de canais ao servidor.

Uso:
    from app.bootstrap import build_channel_server, initialize_app

    # Na inicialização do serviço
    initialize_app()

    # No lifespan do FastAPI
    server = build_channel_server(http_client, channels, backend)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.routes.channels.server import ChannelServer
from app.bootstrap.adapters import create_backend, create_handlers, create_registry
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_backend_settings,
    get_freshchat_settings,
    get_gateway_settings,
    get_slack_settings,
    get_zenvia_settings,
)

if TYPE_CHECKING:
    from app.infra.http import HttpClient
    from app.infra.stores import ChannelRepository
    from app.protocols import BackendProtocol

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    settings = get_gateway_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes.

    Configura logging em nível DEBUG sem JSON para facilitar debug.
    """
    configure_logging(
        level="DEBUG",
        service_name=f"{get_gateway_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
        json_output=False,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    settings = get_gateway_settings()
    environment = settings.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"gateway: {error}" for error in settings.validate())
    errors.extend(f"backend: {error}" for error in get_backend_settings().validate(settings))
    errors.extend(f"freshchat: {error}" for error in get_freshchat_settings().validate())
    errors.extend(f"zenvia: {error}" for error in get_zenvia_settings().validate())
    errors.extend(f"slack: {error}" for error in get_slack_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


def build_channel_server(
    http_client: HttpClient,
    channels: ChannelRepository,
    backend: BackendProtocol,
) -> ChannelServer:
    """Cria registro, servidor e inicializa todos os adapters (registro selado)."""
    registry = create_registry(http_client)
    server = ChannelServer(registry, channels, backend)
    registry.initialize(server)
    return server


__all__ = [
    "build_channel_server",
    "create_backend",
    "create_handlers",
    "create_registry",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
