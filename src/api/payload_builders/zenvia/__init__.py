"""Payload builders Zenvia SMS."""

from .builder import MAX_MSG_LENGTH, build_parts, build_request

__all__ = ["MAX_MSG_LENGTH", "build_parts", "build_request"]
