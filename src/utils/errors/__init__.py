"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthenticationError,
    ChannelNotFoundError,
    ConfigError,
    ForbiddenError,
    GatewayError,
    IgnoredEvent,
    NetworkError,
    ProviderError,
    StorageError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "ChannelNotFoundError",
    "ConfigError",
    "ForbiddenError",
    "GatewayError",
    "IgnoredEvent",
    "NetworkError",
    "ProviderError",
    "StorageError",
    "ValidationError",
]
