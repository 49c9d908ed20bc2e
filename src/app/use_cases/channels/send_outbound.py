"""Entry point outbound: seleciona o adapter pelo tipo de canal e envia."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.domain import MsgStatusValue
from app.observability import record_latency, record_outcome
from utils.errors import ConfigError

if TYPE_CHECKING:
    from app.domain import MsgStatus, OutboundMsg
    from app.protocols import BackendProtocol
    from app.registry import AdapterRegistry

logger = logging.getLogger(__name__)


async def send_outbound_message(
    registry: AdapterRegistry,
    msg: OutboundMsg,
    *,
    backend: BackendProtocol | None = None,
) -> MsgStatus:
    """Envia a mensagem pelo adapter do canal e devolve o status agregado.

    O status é `wired` apenas se todas as partes foram aceitas; caso
    contrário vem `errored` com `error` preenchido e a trilha de logs. Não há
    retry aqui: a decisão fica com o chamador.

    Args:
        registry: Registro de adapters
        msg: Mensagem outbound
        backend: Quando informado, o status resultante é persistido

    Raises:
        ChannelNotFoundError: Tipo de canal sem adapter.
        ConfigError: Credencial obrigatória ausente (nenhuma chamada feita).
    """
    code = msg.channel.channel_type
    handler = registry.get(code)
    log_extra = {"channel_type": code, "channel_uuid": msg.channel.uuid, "msg_id": msg.id}

    started_at = time.perf_counter()
    try:
        status = await handler.send(msg)
    except ConfigError as exc:
        logger.warning("outbound_config_missing", extra={**log_extra, "reason": exc.reason})
        record_outcome("outbound", code, "config_error", exc.reason)
        raise
    finally:
        record_latency("outbound", f"{code}.send", (time.perf_counter() - started_at) * 1000)

    if status.status is MsgStatusValue.WIRED:
        logger.info("outbound_wired", extra={**log_extra, "log_count": len(status.logs)})
    else:
        logger.warning(
            "outbound_failed",
            extra={
                **log_extra,
                "status": status.status.value,
                "reason": status.error.reason if status.error else None,
                "log_count": len(status.logs),
            },
        )
    record_outcome("outbound", code, status.status.name.lower())

    if backend is not None:
        await backend.write_msg_status(status)
    return status
