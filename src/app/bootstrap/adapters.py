"""Composition root dos adapters: lista explícita de provedores e backend.

Novo provedor = novo item em `create_handlers`; nada é registrado por
efeito colateral de import.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.freshchat import FreshChatHandler
from api.connectors.outbound import SendPolicy
from api.connectors.slack import SlackHandler
from api.connectors.zenvia import ZenviaHandler
from api.connectors.zenvia_whatsapp import ZenviaWhatsAppHandler
from app.infra.stores import MemoryBackend, RedisBackend
from app.registry import AdapterRegistry
from config.settings import (
    get_backend_settings,
    get_freshchat_settings,
    get_gateway_settings,
    get_slack_settings,
    get_zenvia_settings,
)

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

    from app.infra.http import HttpClient
    from app.protocols import BackendProtocol, ChannelHandlerProtocol
    from config.settings import GatewaySettings

logger = logging.getLogger(__name__)


def resolve_send_policy(value: str) -> SendPolicy:
    """Converte SEND_POLICY; valor desconhecido usa o padrão com alerta."""
    try:
        return SendPolicy(value)
    except ValueError:
        logger.warning(
            "send_policy_invalid",
            extra={"send_policy": value, "fallback": SendPolicy.ABORT_ON_FIRST_FAILURE.value},
        )
        return SendPolicy.ABORT_ON_FIRST_FAILURE


def create_handlers(
    http_client: HttpClient,
    settings: GatewaySettings | None = None,
) -> list[ChannelHandlerProtocol]:
    """Instancia um adapter por provedor suportado."""
    settings = settings or get_gateway_settings()
    policy = resolve_send_policy(settings.send_policy)
    zenvia = get_zenvia_settings()
    return [
        FreshChatHandler(
            http_client,
            api_url=get_freshchat_settings().api_url,
            validate_signatures=settings.validate_signatures,
            policy=policy,
        ),
        ZenviaHandler(http_client, send_url=zenvia.sms_send_url, policy=policy),
        ZenviaWhatsAppHandler(http_client, send_url=zenvia.whatsapp_send_url, policy=policy),
        SlackHandler(http_client, api_url=get_slack_settings().api_url, policy=policy),
    ]


def create_registry(
    http_client: HttpClient,
    settings: GatewaySettings | None = None,
) -> AdapterRegistry:
    """Cria registro (ainda aberto) com todos os adapters.

    O registro é selado por `AdapterRegistry.initialize(server)`.
    """
    return AdapterRegistry(create_handlers(http_client, settings))


def create_backend(redis_client: AsyncRedis[bytes] | None = None) -> BackendProtocol:
    """Cria backend conforme BACKEND (memory|redis).

    Raises:
        ValueError: BACKEND=redis sem cliente Redis.
    """
    backend_settings = get_backend_settings()
    if backend_settings.kind == "redis":
        if redis_client is None:
            raise ValueError("BACKEND=redis requer cliente Redis")
        logger.info("backend_created", extra={"backend": "redis"})
        return RedisBackend(redis_client, status_ttl_seconds=backend_settings.status_ttl_seconds)

    logger.info("backend_created", extra={"backend": "memory"})
    return MemoryBackend()
