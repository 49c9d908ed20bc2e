"""Payload de webhook FreshChat (evento `message_create`).

Partes de mensagem não carregam `type`: a variante é identificada pela chave
presente (`text` ou `image`). Outras chaves viram `UnsupportedPart`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag


class TextBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: str = ""


class ImageBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str = ""


class TextPart(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: TextBody


class ImagePart(BaseModel):
    model_config = ConfigDict(extra="ignore")

    image: ImageBody


class UnsupportedPart(BaseModel):
    """Parte sem `text`/`image` (ex: file, quick_reply)."""

    model_config = ConfigDict(extra="allow")

    @property
    def kind(self) -> str:
        return ",".join(sorted(self.model_extra or {})) or "empty"


def _part_tag(value: Any) -> str:
    if isinstance(value, dict):
        keys = value.keys()
    else:
        keys = {name for name in ("text", "image") if getattr(value, name, None) is not None}
    if "text" in keys:
        return "text"
    if "image" in keys:
        return "image"
    return "unsupported"


MessagePart = Annotated[
    Union[
        Annotated[TextPart, Tag("text")],
        Annotated[ImagePart, Tag("image")],
        Annotated[UnsupportedPart, Tag("unsupported")],
    ],
    Discriminator(_part_tag),
]


class FreshChatMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message_parts: list[MessagePart] = Field(default_factory=list)
    app_id: str = ""
    actor_id: str = ""
    id: str = ""
    channel_id: str = ""
    conversation_id: str = ""
    message_type: str = ""
    actor_type: str = ""
    created_time: datetime | None = None


class FreshChatActor(BaseModel):
    model_config = ConfigDict(extra="ignore")

    actor_type: str = ""
    actor_id: str = ""


class FreshChatData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: FreshChatMessage | None = None


class FreshChatPayload(BaseModel):
    """Evento recebido na rota `receive`."""

    model_config = ConfigDict(extra="ignore")

    actor: FreshChatActor = Field(default_factory=FreshChatActor)
    action: str = ""
    action_time: datetime | None = None
    data: FreshChatData = Field(default_factory=FreshChatData)
