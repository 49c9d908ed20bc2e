"""Registro de adapters de canal."""

from .adapter_registry import AdapterRegistry, RegistrySealedError

__all__ = ["AdapterRegistry", "RegistrySealedError"]
