"""Corpos de resposta dos webhooks (aceito, ignorado, erro)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.protocols import WebhookResponse

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain import InboundMsg, MsgStatus
    from utils.errors import GatewayError


def msgs_accepted(msgs: Sequence[InboundMsg]) -> WebhookResponse:
    return WebhookResponse(
        status_code=200,
        body={"message": "Message Accepted", "data": [msg.as_dict() for msg in msgs]},
    )


def statuses_accepted(statuses: Sequence[MsgStatus]) -> WebhookResponse:
    return WebhookResponse(
        status_code=200,
        body={"message": "Status Update Accepted", "data": [status.as_dict() for status in statuses]},
    )


def ignored(reason: str) -> WebhookResponse:
    """Evento descartado: sucesso para o provedor, sem efeitos."""
    return WebhookResponse(
        status_code=200,
        body={"message": "Ignored", "data": [{"type": "info", "info": reason}]},
    )


def error(exc: GatewayError) -> WebhookResponse:
    return WebhookResponse(
        status_code=exc.http_status,
        body={"message": "Error", "data": [{"type": "error", "error": str(exc)}]},
    )
