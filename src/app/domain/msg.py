"""Mensagens canônicas (inbound e outbound)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import uuid4

if TYPE_CHECKING:
    from .channel import Channel
    from .urn import URN


@dataclass(frozen=True, slots=True)
class InboundMsg:
    """Mensagem recebida, criada por um normalizer a partir de um webhook.

    Um único evento pode gerar zero, uma ou várias mensagens (uma por parte).
    """

    channel: Channel
    urn: URN
    text: str = ""
    attachments: tuple[str, ...] = ()
    external_id: str | None = None
    received_on: datetime = field(default_factory=lambda: datetime.now(UTC))
    contact_name: str | None = None
    uuid: str = field(default_factory=lambda: str(uuid4()))

    def as_dict(self) -> dict[str, object]:
        """Serializa para o corpo de confirmação do webhook."""
        return {
            "type": "msg",
            "channel_uuid": self.channel.uuid,
            "msg_uuid": self.uuid,
            "text": self.text,
            "urn": str(self.urn),
            "attachments": list(self.attachments),
            "external_id": self.external_id,
            "received_on": self.received_on.isoformat(),
            "contact_name": self.contact_name,
        }


@dataclass(frozen=True, slots=True)
class OutboundMsg:
    """Mensagem a enviar, pertencente ao backend (adapters só leem)."""

    id: int
    channel: Channel
    urn: URN
    text: str = ""
    attachments: tuple[str, ...] = ()
    uuid: str = field(default_factory=lambda: str(uuid4()))
