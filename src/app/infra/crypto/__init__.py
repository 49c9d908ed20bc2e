"""Criptografia de webhooks: verificação de assinatura RSA dos provedores."""

from .keys import load_public_key
from .signature import SignatureVerifier, verify_rsa_signature

__all__ = [
    "SignatureVerifier",
    "load_public_key",
    "verify_rsa_signature",
]
