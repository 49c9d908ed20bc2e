"""Normalizer Zenvia SMS (MO e status)."""

from .models import ZenviaMessagePayload, ZenviaStatusPayload
from .normalizer import normalize_message, normalize_status, parse_received

__all__ = [
    "ZenviaMessagePayload",
    "ZenviaStatusPayload",
    "normalize_message",
    "normalize_status",
    "parse_received",
]
