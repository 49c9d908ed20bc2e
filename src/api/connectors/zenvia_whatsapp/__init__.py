"""Connector Zenvia WhatsApp."""

from .handler import DEFAULT_SEND_URL, ZenviaWhatsAppHandler

__all__ = ["DEFAULT_SEND_URL", "ZenviaWhatsAppHandler"]
