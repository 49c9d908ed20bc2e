"""Construção de entidades canônicas compartilhada pelos backends."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.domain import InboundMsg, MsgStatus
from app.protocols import BackendProtocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain import URN, Channel, MsgStatusValue


def status_key(status: MsgStatus) -> str:
    """Chave de correlação: id do provedor quando conhecido, senão id interno."""
    if status.external_id:
        return f"ext:{status.external_id}"
    return f"id:{status.msg_id}"


class EntityFactoryBackend(BackendProtocol):
    """Implementa os construtores do protocolo; persistência fica na subclasse."""

    def new_incoming_msg(
        self,
        channel: Channel,
        urn: URN,
        text: str,
        *,
        attachments: Sequence[str] = (),
        external_id: str | None = None,
        received_on: datetime | None = None,
        contact_name: str | None = None,
    ) -> InboundMsg:
        return InboundMsg(
            channel=channel,
            urn=urn,
            text=text,
            attachments=tuple(attachments),
            external_id=external_id,
            received_on=received_on or datetime.now(UTC),
            contact_name=contact_name,
        )

    def new_status_for_id(
        self,
        channel: Channel,
        msg_id: int,
        status: MsgStatusValue,
    ) -> MsgStatus:
        return MsgStatus(channel=channel, status=status, msg_id=msg_id)

    def new_status_for_external_id(
        self,
        channel: Channel,
        external_id: str,
        status: MsgStatusValue,
    ) -> MsgStatus:
        return MsgStatus(channel=channel, status=status, external_id=external_id)
