"""Entry point inbound: rota do adapter -> persistência -> confirmação.

Desfechos:
- aceito: mensagens/status persistidos, depois 200 com os eventos
- ignorado (`IgnoredEvent`): 200 sem efeitos colaterais
- rejeitado (`GatewayError`): status HTTP do erro, nada persistido
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.observability import record_latency, record_outcome
from utils.errors import GatewayError, IgnoredEvent

from . import responses

if TYPE_CHECKING:
    from app.protocols import InboundRequest, InboundResult, ServerProtocol, WebhookResponse
    from app.registry import AdapterRegistry

logger = logging.getLogger(__name__)


async def handle_inbound_request(
    registry: AdapterRegistry,
    server: ServerProtocol,
    channel_type: str,
    channel_uuid: str,
    action: str,
    request: InboundRequest,
) -> WebhookResponse:
    """Processa um webhook de provedor e devolve a resposta HTTP.

    Args:
        registry: Registro de adapters (já inicializado)
        server: Fonte de canais e do backend
        channel_type: Código do tipo de canal vindo da rota
        channel_uuid: UUID do canal vindo da rota
        action: Ação da rota (ex: "receive", "status")
        request: Requisição com corpo já bufferizado
    """
    code = channel_type.upper()
    log_extra = {"channel_type": code, "channel_uuid": channel_uuid, "action": action}
    started_at = time.perf_counter()
    try:
        route = registry.route(code, request.method, action)
        channel = server.get_channel(code, channel_uuid)
        result = await route(channel, request)
        response = await _persist_and_acknowledge(server, result)
    except IgnoredEvent as exc:
        logger.info("webhook_ignored", extra={**log_extra, "reason": exc.reason})
        record_outcome("inbound", code, "ignored", exc.reason)
        return responses.ignored(exc.reason)
    except GatewayError as exc:
        logger.warning(
            "webhook_rejected",
            extra={
                **log_extra,
                "reason": exc.reason,
                "error_type": type(exc).__name__,
                "status_code": exc.http_status,
            },
        )
        record_outcome("inbound", code, "rejected", exc.reason)
        return responses.error(exc)
    finally:
        record_latency("inbound", f"{code}.{action}", (time.perf_counter() - started_at) * 1000)

    logger.info(
        "webhook_accepted",
        extra={
            **log_extra,
            "msg_count": len(result.msgs),
            "status_count": len(result.statuses),
        },
    )
    record_outcome("inbound", code, "accepted")
    return response


async def _persist_and_acknowledge(server: ServerProtocol, result: InboundResult) -> WebhookResponse:
    """Persiste eventos antes de confirmar; resposta customizada tem prioridade."""
    backend = server.backend
    if result.msgs:
        await backend.write_msgs(result.msgs)
    for status in result.statuses:
        await backend.write_msg_status(status)

    if result.response is not None:
        return result.response
    if result.statuses and not result.msgs:
        return responses.statuses_accepted(result.statuses)
    return responses.msgs_accepted(result.msgs)
