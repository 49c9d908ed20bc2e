"""Normalizer FreshChat."""

from .models import FreshChatPayload
from .normalizer import normalize_message

__all__ = ["FreshChatPayload", "normalize_message"]
