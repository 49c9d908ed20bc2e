"""Connector FreshChat."""

from .handler import DEFAULT_API_URL, SIGNATURE_HEADER, FreshChatHandler

__all__ = ["DEFAULT_API_URL", "SIGNATURE_HEADER", "FreshChatHandler"]
