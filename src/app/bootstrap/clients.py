"""Factories de clientes externos: HTTP dos provedores e Redis."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.http import HttpClient, HttpClientConfig

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

    from config.settings import GatewaySettings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# HTTP Client Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_http_client(settings: GatewaySettings) -> HttpClient:
    """Cria cliente HTTP compartilhado pelos adapters (sem retries)."""
    return HttpClient(HttpClientConfig(timeout_seconds=settings.http_timeout_seconds))


# ──────────────────────────────────────────────────────────────────────────────
# Redis Client Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_async_redis_client(redis_url: str) -> AsyncRedis[bytes]:
    """Cria cliente Redis assíncrono.

    Raises:
        ValueError: Se REDIS_URL não configurado
    """
    from redis.asyncio import Redis as AsyncRedis

    if not redis_url:
        msg = "REDIS_URL não configurado"
        raise ValueError(msg)

    client: AsyncRedis[bytes] = AsyncRedis.from_url(
        redis_url,
        decode_responses=False,
        socket_timeout=5.0,
        socket_connect_timeout=5.0,
    )

    logger.info("async_redis_client_created")
    return client
