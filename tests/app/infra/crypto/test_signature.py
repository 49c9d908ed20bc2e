"""Testes da verificação de assinatura RSA de webhooks."""

from __future__ import annotations

import base64
import io

import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa

from app.infra.crypto import SignatureVerifier, load_public_key, verify_rsa_signature
from tests.fakes.fake_gateway import make_channel
from utils.errors import AuthenticationError

BODY = b'{"actor":{"actor_type":"user"},"action":"message_create"}'


@pytest.fixture(scope="module")
def private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="module")
def public_pem(private_key: rsa.RSAPrivateKey) -> str:
    return (
        private_key.public_key()
        .public_bytes(
            serialization.Encoding.PEM,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )


def _sign(private_key: rsa.RSAPrivateKey, body: bytes) -> str:
    signature = private_key.sign(body, padding.PKCS1v15(), hashes.SHA256())
    return base64.b64encode(signature).decode()


class TestVerifyRsaSignature:
    """Testes para verify_rsa_signature."""

    def test_valid_signature(self, private_key: rsa.RSAPrivateKey, public_pem: str) -> None:
        verify_rsa_signature(public_pem, io.BytesIO(BODY), _sign(private_key, BODY))

    def test_flipped_byte_is_rejected(self, private_key: rsa.RSAPrivateKey, public_pem: str) -> None:
        signature = _sign(private_key, BODY)
        tampered = bytearray(BODY)
        tampered[5] ^= 0x01

        with pytest.raises(AuthenticationError) as exc_info:
            verify_rsa_signature(public_pem, io.BytesIO(bytes(tampered)), signature)
        assert exc_info.value.reason == "signature_mismatch"

    def test_missing_signature(self, public_pem: str) -> None:
        with pytest.raises(AuthenticationError) as exc_info:
            verify_rsa_signature(public_pem, io.BytesIO(BODY), None)
        assert exc_info.value.reason == "missing_signature"

    def test_malformed_key(self, private_key: rsa.RSAPrivateKey) -> None:
        with pytest.raises(AuthenticationError) as exc_info:
            verify_rsa_signature("not a key", io.BytesIO(BODY), _sign(private_key, BODY))
        assert exc_info.value.reason == "invalid_public_key"

    def test_malformed_base64(self, public_pem: str) -> None:
        with pytest.raises(AuthenticationError) as exc_info:
            verify_rsa_signature(public_pem, io.BytesIO(BODY), "@@not-base64@@")
        assert exc_info.value.reason == "invalid_base64"

    def test_http_status_is_unauthorized(self, public_pem: str) -> None:
        with pytest.raises(AuthenticationError) as exc_info:
            verify_rsa_signature(public_pem, io.BytesIO(BODY), None)
        assert exc_info.value.http_status == 401


def test_load_public_key_rejects_non_rsa() -> None:
    ec_pem = (
        ec.generate_private_key(ec.SECP256R1())
        .public_key()
        .public_bytes(serialization.Encoding.PEM, serialization.PublicFormat.SubjectPublicKeyInfo)
        .decode()
    )
    with pytest.raises(AuthenticationError):
        load_public_key(ec_pem)


class TestSignatureVerifier:
    """Testes para SignatureVerifier."""

    def test_reads_key_from_channel_config(
        self, private_key: rsa.RSAPrivateKey, public_pem: str
    ) -> None:
        verifier = SignatureVerifier("X-Signature")
        channel = make_channel("FC", {"secret": public_pem})

        verifier.verify(channel, io.BytesIO(BODY), _sign(private_key, BODY))

    def test_disabled_accepts_anything(self) -> None:
        verifier = SignatureVerifier("X-Signature", enabled=False)

        verifier.verify(make_channel("FC"), io.BytesIO(BODY), None)

    def test_missing_key_in_config(self, private_key: rsa.RSAPrivateKey) -> None:
        verifier = SignatureVerifier("X-Signature")

        with pytest.raises(AuthenticationError):
            verifier.verify(make_channel("FC"), io.BytesIO(BODY), _sign(private_key, BODY))
