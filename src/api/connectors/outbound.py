"""Pipeline outbound compartilhado: envio sequencial de partes e logs de canal.

Partes de uma mesma mensagem são enviadas estritamente em ordem (nunca em
paralelo) e agregadas em um único `MsgStatus`, que começa `errored` e só é
promovido a `wired` quando todas as partes foram aceitas.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, TypeVar

from app.domain.status import ChannelLog, MsgStatusValue
from utils.errors import GatewayError, NetworkError, ProviderError, ValidationError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from app.domain import Channel, MsgStatus
    from app.infra.http import RequestResponse

logger = logging.getLogger(__name__)

PartT = TypeVar("PartT")


class SendPolicy(StrEnum):
    """Política para falha em uma das partes de uma mensagem."""

    ABORT_ON_FIRST_FAILURE = "abort_on_first_failure"
    BEST_EFFORT = "best_effort"


def channel_log_from_rr(
    description: str,
    channel: Channel,
    msg_id: int | None,
    rr: RequestResponse,
    error: GatewayError | None = None,
) -> ChannelLog:
    """Cria ChannelLog imutável a partir do snapshot da troca HTTP."""
    return ChannelLog(
        description=description,
        channel_uuid=channel.uuid,
        msg_id=msg_id,
        method=rr.method,
        url=rr.url,
        status_code=rr.status_code,
        request=rr.request_body,
        response=rr.text,
        elapsed_ms=rr.elapsed_ms,
        error=f"{description} Error: {error}" if error else None,
    )


def require_ok(rr: RequestResponse) -> GatewayError | None:
    """Checagem padrão: sucesso apenas em status HTTP 2xx."""
    if rr.ok:
        return None
    return ProviderError(
        f"received non 200 status: {rr.status_code}", reason="http_status_not_ok"
    )


async def exchange(
    status: MsgStatus,
    description: str,
    call: Awaitable[RequestResponse],
    check: Callable[[RequestResponse], GatewayError | None] = require_ok,
) -> RequestResponse:
    """Executa uma chamada ao provedor e anexa o ChannelLog ao status.

    Raises:
        NetworkError: Falha de transporte (log anexado antes de propagar).
        ProviderError: `check` sinalizou falha no payload/status.
    """
    try:
        rr = await call
    except NetworkError as exc:
        if exc.request_response is not None:
            status.add_log(
                channel_log_from_rr(description, status.channel, status.msg_id, exc.request_response, exc)
            )
        raise

    error = check(rr)
    status.add_log(channel_log_from_rr(description, status.channel, status.msg_id, rr, error))
    if error is not None:
        raise error
    return rr


async def send_parts(
    status: MsgStatus,
    parts: Sequence[PartT],
    send_part: Callable[[PartT], Awaitable[str | None]],
    *,
    policy: SendPolicy = SendPolicy.ABORT_ON_FIRST_FAILURE,
) -> MsgStatus:
    """Envia partes em ordem e dobra os resultados em um único status.

    `send_part` devolve o id externo da parte (ou None) e levanta
    NetworkError/ProviderError em falha. O primeiro id externo recebido é
    associado ao status.
    """
    if not parts:
        status.error = ValidationError("message has no content to send", reason="empty_message")
        return status

    failed = False
    for index, part in enumerate(parts):
        try:
            external_id = await send_part(part)
        except (NetworkError, ProviderError) as exc:
            failed = True
            status.error = exc
            logger.warning(
                "outbound_part_failed",
                extra={
                    "channel_type": status.channel.channel_type,
                    "msg_id": status.msg_id,
                    "part_index": index,
                    "part_count": len(parts),
                    "reason": exc.reason,
                    "policy": policy.value,
                },
            )
            if policy is SendPolicy.ABORT_ON_FIRST_FAILURE:
                break
            continue
        if external_id and status.external_id is None:
            status.set_external_id(external_id)

    if not failed:
        status.set_status(MsgStatusValue.WIRED)
    return status
