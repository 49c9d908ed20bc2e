"""Normalizer Zenvia WhatsApp (mensagens com fan-out e status)."""

from .models import ZenviaWhatsAppPayload, ZenviaWhatsAppStatusPayload
from .normalizer import normalize_messages, normalize_status

__all__ = [
    "ZenviaWhatsAppPayload",
    "ZenviaWhatsAppStatusPayload",
    "normalize_messages",
    "normalize_status",
]
