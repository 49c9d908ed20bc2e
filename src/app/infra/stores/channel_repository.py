"""Repositório de canais carregado de arquivo YAML.

Formato:

    channels:
      - uuid: 8eb23e93-5ecb-45ba-b726-3b064e0c56ab
        channel_type: ZW
        name: Atendimento WhatsApp
        address: "+5511999999999"
        country: BR
        config:
          api_key: ${ZENVIA_WHATSAPP_TOKEN}

Valores de `config` aceitam referências `${VAR}` resolvidas pelo ambiente,
mantendo segredos fora do arquivo. Variável não definida resolve para vazio,
então a credencial conta como ausente.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from app.domain import Channel
from utils.errors import ChannelNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping


logger = logging.getLogger(__name__)

_ENV_REF_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def resolve_env_refs(value: str) -> str:
    """Substitui referências `${VAR}` pelo ambiente; variável ausente vira vazio."""
    return _ENV_REF_RE.sub(lambda match: os.environ.get(match.group(1), ""), value)


class ChannelConfigError(Exception):
    """Arquivo de canais ausente ou inválido."""


class ChannelRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    uuid: str = Field(min_length=1)
    channel_type: str = Field(pattern=r"^[A-Za-z]{2}$")
    name: str = ""
    address: str = ""
    country: str | None = Field(None, pattern=r"^[A-Za-z]{2}$")
    config: dict[str, str] = Field(default_factory=dict)

    @field_validator("config", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(k): "" if v is None else str(v) for k, v in value.items()}
        return value

    def to_channel(self) -> Channel:
        return Channel(
            uuid=self.uuid,
            channel_type=self.channel_type.upper(),
            name=self.name,
            address=self.address,
            country=self.country.upper() if self.country else None,
            config={key: resolve_env_refs(value) for key, value in self.config.items()},
        )


class ChannelRepository:
    """Lookup somente-leitura de canais por (tipo, uuid)."""

    def __init__(self, channels: Iterable[Channel] = ()) -> None:
        index: dict[tuple[str, str], Channel] = {}
        for channel in channels:
            key = (channel.channel_type, channel.uuid)
            if key in index:
                raise ChannelConfigError(f"Canal duplicado: {channel.channel_type}/{channel.uuid}")
            index[key] = channel
        self._channels: Mapping[tuple[str, str], Channel] = MappingProxyType(index)

    @classmethod
    def from_data(cls, data: Any) -> ChannelRepository:
        """Cria repositório a partir do conteúdo já decodificado do YAML.

        Raises:
            ChannelConfigError: Estrutura inválida.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict) or not isinstance(data.get("channels", []), list):
            raise ChannelConfigError("YAML de canais deve conter a lista 'channels'")
        try:
            records = [ChannelRecord.model_validate(item) for item in data.get("channels", [])]
        except PydanticValidationError as exc:
            raise ChannelConfigError(f"Canal inválido: {exc.error_count()} erro(s)") from exc
        return cls(record.to_channel() for record in records)

    @classmethod
    def from_yaml(cls, path: str | Path) -> ChannelRepository:
        """Carrega canais do arquivo YAML.

        Raises:
            ChannelConfigError: Arquivo ausente, YAML inválido ou canal inválido.
        """
        file_path = Path(path)
        if not file_path.exists():
            raise ChannelConfigError(f"Arquivo de canais não encontrado: {file_path}")
        try:
            with file_path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ChannelConfigError(f"YAML de canais inválido: {file_path}") from exc

        repository = cls.from_data(data)
        logger.info("channels_loaded", extra={"channel_count": len(repository)})
        return repository

    def get(self, channel_type: str, channel_uuid: str) -> Channel:
        """Retorna canal configurado.

        Raises:
            ChannelNotFoundError: Nenhum canal para o par (tipo, uuid).
        """
        channel = self._channels.get((channel_type.upper(), channel_uuid))
        if channel is None:
            raise ChannelNotFoundError(f"channel not found: {channel_type.upper()}/{channel_uuid}")
        return channel

    def __len__(self) -> int:
        return len(self._channels)

    def __iter__(self) -> Iterator[Channel]:
        return iter(self._channels.values())
