"""Normalizer Zenvia SMS."""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from api.status_mappers import ZENVIA_SMS_STATUS
from app.domain.urn import new_tel_urn_for_country
from utils.errors import IgnoredEvent, ValidationError

if TYPE_CHECKING:
    from app.domain import Channel, InboundMsg, MsgStatus
    from app.protocols import BackendProtocol

    from .models import ZenviaMessagePayload, ZenviaStatusPayload

# 2017-05-03T06:04:45.345-03:00
_RECEIVED_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}[+-]\d{2}:\d{2}$")


def parse_received(value: str) -> datetime:
    """Converte `received` (com milissegundos e offset) para UTC.

    Raises:
        ValidationError: Formato diferente de `YYYY-MM-DDTHH:MM:SS.fff±HH:MM`.
    """
    if not _RECEIVED_RE.match(value):
        raise ValidationError(f"invalid date format: {value}", reason="invalid_timestamp")
    try:
        parsed = datetime.strptime(value, "%Y-%m-%dT%H:%M:%S.%f%z")
    except ValueError as exc:
        raise ValidationError(f"invalid date format: {value}", reason="invalid_timestamp") from exc
    return parsed.astimezone(UTC)


def normalize_message(
    backend: BackendProtocol,
    channel: Channel,
    payload: ZenviaMessagePayload,
) -> InboundMsg:
    mo = payload.callback_mo_request
    received_on = parse_received(mo.received)
    if not mo.body:
        raise IgnoredEvent("no message")

    urn = new_tel_urn_for_country(mo.mobile, channel.country)
    return backend.new_incoming_msg(
        channel,
        urn,
        mo.body,
        external_id=mo.correlated_message_sms_id,
        received_on=received_on,
    )


def normalize_status(
    backend: BackendProtocol,
    channel: Channel,
    payload: ZenviaStatusPayload,
) -> MsgStatus:
    mt = payload.callback_mt_request
    return backend.new_status_for_external_id(channel, mt.id, ZENVIA_SMS_STATUS.map(mt.status))
