"""Registro de métricas via structured logging.

As métricas são logs estruturados agregáveis posteriormente (BigQuery,
CloudWatch Insights, etc.).

Métricas suportadas:
- Latência: tempo de tratamento de webhook / envio por tipo de canal
- Desfecho: contador por tipo de canal e resultado (accepted, ignored,
  rejected, wired, errored)
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "inbound", "outbound")
        operation: Nome da operação (ex: "ZW.receive", "SL.send")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação (default: o do contexto atual)
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id or get_correlation_id(),
        },
    )


def record_outcome(
    component: str,
    channel_type: str,
    outcome: str,
    reason: str | None = None,
) -> None:
    """Registra contador de desfecho (sem PII: apenas códigos)."""
    logger.info(
        "metric_outcome",
        extra={
            "metric_type": "counter",
            "component": component,
            "channel_type": channel_type,
            "outcome": outcome,
            "reason": reason,
        },
    )
