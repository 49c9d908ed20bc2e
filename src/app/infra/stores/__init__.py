"""Stores: backends de persistência e repositório de canais.

Módulos disponíveis:
    - memory_backend: Backend em memória para desenvolvimento/testes
    - redis_backend: Backend usando Redis (staging/production)
    - channel_repository: Canais carregados de YAML
"""

from __future__ import annotations

from app.infra.stores.channel_repository import (
    ChannelConfigError,
    ChannelRecord,
    ChannelRepository,
)
from app.infra.stores.entity_factory import EntityFactoryBackend, status_key
from app.infra.stores.memory_backend import MemoryBackend
from app.infra.stores.redis_backend import RedisBackend

__all__ = [
    # Canais
    "ChannelConfigError",
    "ChannelRecord",
    "ChannelRepository",
    # Backends
    "EntityFactoryBackend",
    "MemoryBackend",
    "RedisBackend",
    "status_key",
]
