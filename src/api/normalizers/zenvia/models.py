"""Payloads de callback Zenvia SMS (MO e status de MT)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CallbackMoRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(min_length=1)
    mobile: str = Field(min_length=1)
    body: str
    received: str = Field(min_length=1)
    correlated_message_sms_id: str = Field(alias="correlatedMessageSmsId", min_length=1)


class ZenviaMessagePayload(BaseModel):
    """SMS recebido (rota `receive`)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    callback_mo_request: CallbackMoRequest = Field(alias="callbackMoRequest")


class CallbackMtRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: str = Field(min_length=1)
    id: str = Field(min_length=1)


class ZenviaStatusPayload(BaseModel):
    """Status de SMS enviado (rota `status`)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    callback_mt_request: CallbackMtRequest = Field(alias="callbackMtRequest")
