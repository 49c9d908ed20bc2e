"""Payloads da Slack Events API e respostas da Web API usadas pelo adapter.

O envelope do webhook é uma variante rotulada por `type`: desafio de
verificação de URL ou callback de evento.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, RootModel, Tag

URL_VERIFICATION = "url_verification"


class SlackFile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    name: str = ""
    title: str = ""
    mimetype: str = ""
    filetype: str = ""
    url_private: str = ""
    url_private_download: str = ""
    permalink: str = ""
    permalink_public: str = ""
    is_public: bool = False
    public_url_shared: bool = False


class SlackEvent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str = ""
    channel: str = ""
    user: str = ""
    text: str = ""
    ts: str = ""
    event_ts: str = ""
    channel_type: str = ""
    files: list[SlackFile] = Field(default_factory=list)
    bot_id: str = ""


class UrlVerification(BaseModel):
    """Desafio enviado ao cadastrar a URL de eventos."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["url_verification"]
    token: str = ""
    challenge: str = ""


class EventCallback(BaseModel):
    """Callback de evento (`event_callback` ou outro tipo não-desafio)."""

    model_config = ConfigDict(extra="ignore")

    type: str = ""
    token: str = ""
    team_id: str = ""
    api_app_id: str = ""
    event: SlackEvent = Field(default_factory=SlackEvent)
    event_id: str = ""
    event_time: int = 0


def _envelope_tag(value: Any) -> str:
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return "url_verification" if kind == URL_VERIFICATION else "event"


class SlackEnvelope(
    RootModel[
        Annotated[
            Union[
                Annotated[UrlVerification, Tag("url_verification")],
                Annotated[EventCallback, Tag("event")],
            ],
            Discriminator(_envelope_tag),
        ]
    ]
):
    """Corpo do webhook Slack já resolvido para a variante correta."""


class SlackFileResponse(BaseModel):
    """Resposta de `files.sharedPublicURL` / `files.upload`."""

    model_config = ConfigDict(extra="ignore")

    ok: bool = False
    file: SlackFile = Field(default_factory=SlackFile)
    error: str = ""


class SlackUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    name: str = ""
    real_name: str = ""


class SlackUserInfo(BaseModel):
    """Resposta de `users.info`."""

    model_config = ConfigDict(extra="ignore")

    ok: bool = False
    user: SlackUser = Field(default_factory=SlackUser)
    error: str = ""
