"""Settings específicas de Slack.

Tokens (bot, user, verification) ficam na configuração de cada canal.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

SLACK_API_URL: str = "https://slack.com/api"


@dataclass(frozen=True)
class SlackSettings:
    """Configurações do canal Slack.

    Attributes:
        api_url: URL base da Web API (chat.postMessage, files.upload, ...)
    """

    api_url: str = SLACK_API_URL

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.api_url.startswith("https://"):
            errors.append("SLACK_API_URL deve usar https")
        return errors


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instância cacheada de SlackSettings."""
    return SlackSettings(api_url=os.getenv("SLACK_API_URL", SLACK_API_URL))
