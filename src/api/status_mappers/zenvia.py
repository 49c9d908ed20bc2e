"""Tabelas de status dos provedores Zenvia (SMS e WhatsApp)."""

from __future__ import annotations

from app.domain.status import MsgStatusValue

from .base import StatusMapper

ZENVIA_SMS_STATUS = StatusMapper(
    provider="zenvia",
    table={
        "00": MsgStatusValue.SENT,
        "01": MsgStatusValue.SENT,
        "02": MsgStatusValue.SENT,
        "03": MsgStatusValue.DELIVERED,
        "04": MsgStatusValue.ERRORED,
        "05": MsgStatusValue.ERRORED,
        "06": MsgStatusValue.ERRORED,
        "07": MsgStatusValue.ERRORED,
        "08": MsgStatusValue.ERRORED,
        "09": MsgStatusValue.ERRORED,
        "10": MsgStatusValue.ERRORED,
    },
)

ZENVIA_WHATSAPP_STATUS = StatusMapper(
    provider="zenvia_whatsapp",
    table={
        "REJECTED": MsgStatusValue.FAILED,
        "NOT_DELIVERED": MsgStatusValue.FAILED,
        "SENT": MsgStatusValue.SENT,
        "DELIVERED": MsgStatusValue.DELIVERED,
        "READ": MsgStatusValue.DELIVERED,
    },
    normalize=str.upper,
)
