"""Settings específicas de FreshChat.

Credenciais (agent id, token, chave pública) ficam na configuração de cada
canal; aqui apenas o endpoint da API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

FRESHCHAT_API_URL: str = "https://api.freshchat.com/v2"


@dataclass(frozen=True)
class FreshChatSettings:
    """Configurações do canal FreshChat.

    Attributes:
        api_url: URL base da API (POST {api_url}/conversations)
    """

    api_url: str = FRESHCHAT_API_URL

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.api_url.startswith("https://"):
            errors.append("FRESHCHAT_API_URL deve usar https")
        return errors


@lru_cache(maxsize=1)
def get_freshchat_settings() -> FreshChatSettings:
    """Retorna instância cacheada de FreshChatSettings."""
    return FreshChatSettings(api_url=os.getenv("FRESHCHAT_API_URL", FRESHCHAT_API_URL))
