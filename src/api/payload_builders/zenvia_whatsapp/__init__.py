"""Payload builders Zenvia WhatsApp."""

from .builder import MAX_MSG_LENGTH, build_contents, build_request

__all__ = ["MAX_MSG_LENGTH", "build_contents", "build_request"]
