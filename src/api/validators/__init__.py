"""Validators: decode e validação de payloads de webhook dos provedores."""

from .payload import decode_and_validate

__all__ = ["decode_and_validate"]
