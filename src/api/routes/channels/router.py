"""Endpoint genérico de webhook dos provedores.

Fluxo:
1. Lê o corpo uma única vez (`ReplayableBody`)
2. Abre escopo de correlation_id (header `x-correlation-id` ou novo UUID)
3. Delega para `handle_inbound_request` (lookup no registro de adapters)
4. Converte `WebhookResponse` em resposta FastAPI
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from app.observability import CORRELATION_HEADER, correlation_scope
from app.protocols import InboundRequest, ReplayableBody
from app.use_cases.channels import handle_inbound_request

if TYPE_CHECKING:
    from app.protocols import WebhookResponse

router = APIRouter()


@router.post("/c/{channel_type}/{channel_uuid}/{action}")
async def receive_webhook(
    channel_type: str,
    channel_uuid: str,
    action: str,
    request: Request,
) -> Response:
    """Recebe webhook de qualquer provedor registrado."""
    body = ReplayableBody(await request.body())
    inbound = InboundRequest(
        method=request.method,
        path=request.url.path,
        body=body,
        headers=dict(request.headers),
        query=dict(request.query_params),
    )

    server = request.app.state.channel_server
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        result = await handle_inbound_request(
            server.registry,
            server,
            channel_type,
            channel_uuid,
            action,
            inbound,
        )

    response = to_http_response(result)
    response.headers[CORRELATION_HEADER] = correlation_id
    return response


def to_http_response(result: WebhookResponse) -> Response:
    """Converte resposta do adapter; corpo não-JSON vai como texto."""
    if result.media_type == "application/json":
        return JSONResponse(content=result.body, status_code=result.status_code)
    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type=result.media_type,
    )
