"""Connector Zenvia SMS."""

from .handler import DEFAULT_SEND_URL, ZenviaHandler

__all__ = ["DEFAULT_SEND_URL", "ZenviaHandler"]
