"""Entrypoint do gateway de canais.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import (
    build_channel_server,
    create_backend,
    initialize_app,
    validate_runtime_settings,
)
from app.bootstrap.clients import create_async_redis_client, create_http_client
from app.infra.stores import ChannelRepository
from config.logging import get_logger
from config.settings import get_backend_settings, get_gateway_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.infra.http import HttpClient
    from app.protocols import BackendProtocol

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


def _make_lifespan(
    channels: ChannelRepository | None,
    backend: BackendProtocol | None,
    http_client: HttpClient | None,
):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Gerencia ciclo de vida da aplicação.

        Startup:
        - Valida configurações
        - Carrega canais do YAML e conecta o backend
        - Registra adapters (registro selado a partir daqui)

        Shutdown:
        - Fecha conexão Redis
        """
        settings = get_gateway_settings()
        logger.info("app_starting", extra={"environment": settings.environment})
        validate_runtime_settings()

        app.state.redis_client = None
        resolved_backend = backend
        if resolved_backend is None:
            if get_backend_settings().kind == "redis":
                app.state.redis_client = create_async_redis_client(settings.redis_url)
            resolved_backend = create_backend(app.state.redis_client)

        app.state.channel_server = build_channel_server(
            http_client or create_http_client(settings),
            channels if channels is not None else ChannelRepository.from_yaml(settings.channels_file),
            resolved_backend,
        )

        yield

        logger.info("app_shutting_down")
        redis_client = app.state.redis_client
        if redis_client is not None:
            await redis_client.aclose()

    return lifespan


def create_app(
    *,
    channels: ChannelRepository | None = None,
    backend: BackendProtocol | None = None,
    http_client: HttpClient | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        channels: Repositório de canais (default: CHANNELS_FILE)
        backend: Backend de persistência (default: conforme BACKEND)
        http_client: Cliente HTTP dos adapters (default: HTTP_TIMEOUT_SECONDS)

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="channel-gateway",
        description="Adapters de canal de um gateway de mensagens multi-provedor",
        version="1.0.0",
        lifespan=_make_lifespan(channels, backend, http_client),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting channel-gateway in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
