"""Settings base do gateway de canais.

Configurações comuns a todos os adapters e ao servidor HTTP.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_TRUE_VALUES = ("true", "1", "yes")
_SEND_POLICIES = ("abort_on_first_failure", "best_effort")


@dataclass(frozen=True)
class GatewaySettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs e tracing
        debug: Modo debug ativo
        log_level: Nível de log (DEBUG|INFO|WARNING|ERROR)
        http_timeout_seconds: Timeout das chamadas aos provedores
        channels_file: Caminho do YAML de canais
        validate_signatures: Verifica assinatura dos webhooks assinados
        send_policy: Falha parcial em envio multi-parte (abort_on_first_failure|best_effort)
        redis_url: URL de conexão Redis (Upstash)
    """

    # Ambiente
    environment: Environment = "development"
    service_name: str = "channel-gateway"
    debug: bool = False
    log_level: str = "INFO"

    # Adapters
    http_timeout_seconds: float = 30.0
    channels_file: str = "channels.yaml"
    validate_signatures: bool = True
    send_policy: str = "abort_on_first_failure"

    # Redis (Upstash)
    redis_url: str = ""

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment == "development"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        valid_envs = {"development", "staging", "production"}
        if self.environment not in valid_envs:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        if self.http_timeout_seconds <= 0:
            errors.append("HTTP_TIMEOUT_SECONDS deve ser > 0")

        if not self.channels_file:
            errors.append("CHANNELS_FILE não configurado")

        if not self.validate_signatures and not self.is_development:
            errors.append("VALIDATE_SIGNATURES=false proibido em staging/production")

        if self.send_policy not in _SEND_POLICIES:
            errors.append(f"SEND_POLICY inválido: {self.send_policy}")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _parse_float(value: str, default: float) -> float:
    try:
        return float(value)
    except ValueError:
        return default


def _load_gateway_from_env() -> GatewaySettings:
    """Carrega GatewaySettings de variáveis de ambiente."""
    return GatewaySettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "channel-gateway"),
        debug=os.getenv("DEBUG", "").lower() in _TRUE_VALUES,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        http_timeout_seconds=_parse_float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"), 30.0),
        channels_file=os.getenv("CHANNELS_FILE", "channels.yaml"),
        validate_signatures=os.getenv("VALIDATE_SIGNATURES", "true").lower() in _TRUE_VALUES,
        send_policy=os.getenv("SEND_POLICY", "abort_on_first_failure").lower(),
        redis_url=os.getenv("REDIS_URL", ""),
    )


@lru_cache(maxsize=1)
def get_gateway_settings() -> GatewaySettings:
    """Retorna instância cacheada de GatewaySettings."""
    return _load_gateway_from_env()
