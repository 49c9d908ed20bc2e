"""Payload builders FreshChat."""

from .builder import build_message_parts, build_request, split_user_path

__all__ = ["build_message_parts", "build_request", "split_user_path"]
