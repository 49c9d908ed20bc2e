"""Verificação de assinatura RSA (PKCS#1 v1.5 sobre SHA-256) de webhooks.

A verificação roda sobre os bytes exatos que o decoder JSON vai consumir:
o corpo é lido uma vez para um buffer (`ReplayableBody`) e cada etapa
recebe seu próprio leitor independente.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import logging
from typing import TYPE_CHECKING

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed

from app.domain.channel import CONFIG_SECRET
from utils.errors import AuthenticationError

from .keys import load_public_key

if TYPE_CHECKING:
    from typing import BinaryIO

    from app.domain.channel import Channel

logger = logging.getLogger(__name__)


def verify_rsa_signature(public_key_pem: str, body: BinaryIO, signature: str | None) -> None:
    """Verifica assinatura base64 de um corpo contra chave pública PEM.

    Args:
        public_key_pem: Chave pública do provedor (PEM)
        body: Leitor posicionado no início do corpo bruto
        signature: Valor do header de assinatura (base64)

    Raises:
        AuthenticationError: Assinatura ausente, chave malformada, base64
            malformado ou assinatura que não confere.
    """
    if not signature:
        raise AuthenticationError("missing request signature", reason="missing_signature")

    public_key = load_public_key(public_key_pem)

    try:
        decoded_signature = base64.b64decode(signature.strip(), validate=True)
    except (ValueError, binascii.Error) as exc:
        raise AuthenticationError(
            "unable to decode base64 signature", reason="invalid_base64"
        ) from exc

    digest = hashlib.sha256(body.read()).digest()
    try:
        public_key.verify(
            decoded_signature,
            digest,
            padding.PKCS1v15(),
            Prehashed(hashes.SHA256()),
        )
    except InvalidSignature as exc:
        raise AuthenticationError(
            "unable to verify signature", reason="signature_mismatch"
        ) from exc


class SignatureVerifier:
    """Verificador configurável por instância de adapter.

    Args:
        header_name: Header HTTP que carrega a assinatura
        config_key: Chave da configuração do canal com a chave pública PEM
        enabled: Quando False, `verify` sempre aceita (provedores/testes sem assinatura)
    """

    def __init__(
        self,
        header_name: str,
        config_key: str = CONFIG_SECRET,
        *,
        enabled: bool = True,
    ) -> None:
        self.header_name = header_name
        self._config_key = config_key
        self.enabled = enabled

    def verify(self, channel: Channel, body: BinaryIO, signature: str | None) -> None:
        """Valida assinatura do webhook do canal.

        Raises:
            AuthenticationError: Ver `verify_rsa_signature`.
        """
        if not self.enabled:
            return
        try:
            verify_rsa_signature(channel.config_value(self._config_key), body, signature)
        except AuthenticationError as exc:
            logger.warning(
                "webhook_signature_invalid",
                extra={
                    "channel_type": channel.channel_type,
                    "channel_uuid": channel.uuid,
                    "reason": exc.reason,
                },
            )
            raise
