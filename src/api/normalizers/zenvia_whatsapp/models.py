"""Payloads de webhook Zenvia WhatsApp (mensagens e status).

Conteúdos são uma variante rotulada por `type`; tipos desconhecidos caem em
`UnsupportedContent` em vez de falhar a validação do evento inteiro.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

_KNOWN_CONTENT_TYPES = frozenset({"text", "file", "location", "payload"})


class TextContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["text"]
    text: str = ""


class FileContent(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: Literal["file"]
    file_url: str = Field("", alias="fileUrl")
    file_mime_type: str = Field("", alias="fileMimeType")
    file_caption: str = Field("", alias="fileCaption")
    file_name: str = Field("", alias="fileName")


class LocationContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["location"]
    latitude: float
    longitude: float
    name: str = ""
    address: str = ""


class PayloadContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["payload"]
    payload: str = ""


class UnsupportedContent(BaseModel):
    """Conteúdo de tipo não suportado (registrado em log e descartado)."""

    model_config = ConfigDict(extra="ignore")

    type: str = Field(min_length=1)


def _content_tag(value: Any) -> str:
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return kind if kind in _KNOWN_CONTENT_TYPES else "unsupported"


Content = Annotated[
    Union[
        Annotated[TextContent, Tag("text")],
        Annotated[FileContent, Tag("file")],
        Annotated[LocationContent, Tag("location")],
        Annotated[PayloadContent, Tag("payload")],
        Annotated[UnsupportedContent, Tag("unsupported")],
    ],
    Discriminator(_content_tag),
]


class ZenviaMessage(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(min_length=1)
    from_: str = Field(alias="from", min_length=1)
    to: str = Field(min_length=1)
    direction: str = Field(min_length=1)
    channel: str = ""
    contents: list[Content]


class ZenviaVisitor(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""


class ZenviaWhatsAppPayload(BaseModel):
    """Evento `MESSAGE` recebido na rota `receive`."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    timestamp: str = Field(min_length=1)
    type: str = Field(min_length=1)
    message: ZenviaMessage
    visitor: ZenviaVisitor = Field(default_factory=ZenviaVisitor)


class ZenviaMessageStatus(BaseModel):
    model_config = ConfigDict(extra="ignore")

    timestamp: str = ""
    code: str = ""


class ZenviaWhatsAppStatusPayload(BaseModel):
    """Evento `MESSAGE_STATUS` recebido na rota `status`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = ""
    type: str = Field(min_length=1)
    message_id: str = Field(alias="messageId", min_length=1)
    message_status: ZenviaMessageStatus = Field(
        default_factory=ZenviaMessageStatus, alias="messageStatus"
    )
