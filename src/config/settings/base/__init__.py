"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.backend import (
    BackendKind,
    BackendSettings,
    get_backend_settings,
)
from config.settings.base.core import (
    Environment,
    GatewaySettings,
    get_gateway_settings,
)

__all__ = [
    # Backend
    "BackendKind",
    "BackendSettings",
    # Core
    "Environment",
    "GatewaySettings",
    "get_backend_settings",
    "get_gateway_settings",
]
