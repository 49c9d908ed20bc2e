"""Modelo de canal: uma integração configurada com um provedor externo."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Chaves genéricas de configuração (nomes específicos ficam em cada provedor)
CONFIG_USERNAME = "username"
CONFIG_PASSWORD = "password"
CONFIG_AUTH_TOKEN = "auth_token"
CONFIG_API_KEY = "api_key"
CONFIG_SECRET = "secret"


@dataclass(frozen=True, slots=True)
class Channel:
    """Canal configurado, imutável durante a requisição.

    Attributes:
        uuid: Identificador do canal na configuração
        channel_type: Código de duas letras do provedor (ex: "FC")
        name: Nome de exibição
        address: Endereço/identidade do canal no provedor
        country: País ISO-3166 alpha-2 para números de telefone (opcional)
        config: Credenciais e parâmetros do provedor (somente leitura)
    """

    uuid: str
    channel_type: str
    name: str = ""
    address: str = ""
    country: str | None = None
    config: Mapping[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "config", MappingProxyType(dict(self.config)))

    def config_value(self, key: str, default: str = "") -> str:
        """Retorna valor de configuração como string (default se ausente/vazio)."""
        value = self.config.get(key)
        if value is None or value == "":
            return default
        return str(value)
