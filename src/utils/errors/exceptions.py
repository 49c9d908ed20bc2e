"""Taxonomia de erros da camada de adapters de canal.

Cada falha fica restrita a uma requisição inbound ou a uma tentativa de
envio outbound; nenhuma delas é fatal para o processo.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.infra.http import RequestResponse


class GatewayError(Exception):
    """Base para erros recuperáveis dos adapters.

    Attributes:
        reason: Código curto e estável do erro (sem PII), usado em logs.
        http_status: Status HTTP devolvido quando o erro encerra um webhook.
    """

    http_status: int = 500
    default_reason: str = "gateway_error"

    def __init__(self, message: str, *, reason: str | None = None) -> None:
        super().__init__(message)
        self.reason = reason or self.default_reason


class ValidationError(GatewayError):
    """Payload malformado, campo obrigatório ausente ou formato de data inválido."""

    http_status = 400
    default_reason = "validation_error"


class AuthenticationError(GatewayError):
    """Assinatura ausente/inválida, chave malformada ou token de verificação errado."""

    http_status = 401
    default_reason = "authentication_error"


class ForbiddenError(AuthenticationError):
    """Token de verificação não confere (desafio de URL)."""

    http_status = 403
    default_reason = "forbidden"


class ConfigError(GatewayError):
    """Credencial obrigatória ausente na configuração do canal."""

    http_status = 400
    default_reason = "missing_config"


class ChannelNotFoundError(GatewayError):
    """Canal inexistente para o par (tipo, uuid) da rota."""

    http_status = 404
    default_reason = "channel_not_found"


class NetworkError(GatewayError):
    """Falha de transporte ao chamar o provedor."""

    http_status = 502
    default_reason = "network_error"

    def __init__(
        self,
        message: str,
        *,
        reason: str | None = None,
        request_response: RequestResponse | None = None,
    ) -> None:
        super().__init__(message, reason=reason)
        self.request_response = request_response


class ProviderError(GatewayError):
    """Provedor aceitou a chamada HTTP mas sinalizou falha no payload."""

    http_status = 502
    default_reason = "provider_error"


class IgnoredEvent(Exception):  # noqa: N818 - não é erro, é um desfecho
    """Evento intencionalmente descartado: confirmado sem gerar mensagens."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class StorageError(GatewayError):
    """Falha do backend ao persistir mensagens, status ou logs."""

    http_status = 503
    default_reason = "storage_error"
