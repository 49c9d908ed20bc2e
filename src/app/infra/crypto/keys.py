"""Carregamento de chaves públicas RSA dos provedores."""

from __future__ import annotations

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from utils.errors import AuthenticationError


def load_public_key(public_key_pem: str) -> rsa.RSAPublicKey:
    """Carrega chave pública RSA em formato PEM (SubjectPublicKeyInfo).

    Args:
        public_key_pem: Chave pública em formato PEM

    Returns:
        Objeto de chave pública RSA

    Raises:
        AuthenticationError: Se a chave estiver ausente, malformada ou não for RSA
    """
    if not public_key_pem or not public_key_pem.strip():
        raise AuthenticationError("missing public key", reason="invalid_public_key")

    try:
        public_key = serialization.load_pem_public_key(public_key_pem.strip().encode("utf-8"))
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise AuthenticationError(
            f"failed to parse DER encoded public key: {type(exc).__name__}",
            reason="invalid_public_key",
        ) from exc

    if not isinstance(public_key, rsa.RSAPublicKey):
        raise AuthenticationError("public key is not RSA", reason="invalid_public_key")
    return public_key
