"""Settings específicas de Zenvia (SMS e WhatsApp).

Os dois produtos usam APIs diferentes: SMS na API REST legada (basic auth)
e WhatsApp na API v2 (header X-API-TOKEN).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

ZENVIA_SMS_SEND_URL: str = "https://api-rest.zenvia360.com.br/services"
ZENVIA_WHATSAPP_SEND_URL: str = "https://api.zenvia.com/v2/channels/whatsapp/messages"


@dataclass(frozen=True)
class ZenviaSettings:
    """Configurações dos canais Zenvia.

    Attributes:
        sms_send_url: Endpoint de envio de SMS
        whatsapp_send_url: Endpoint de envio de mensagens WhatsApp
    """

    sms_send_url: str = ZENVIA_SMS_SEND_URL
    whatsapp_send_url: str = ZENVIA_WHATSAPP_SEND_URL

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.sms_send_url.startswith("https://"):
            errors.append("ZENVIA_SMS_SEND_URL deve usar https")
        if not self.whatsapp_send_url.startswith("https://"):
            errors.append("ZENVIA_WHATSAPP_SEND_URL deve usar https")
        return errors


def _load_from_env() -> ZenviaSettings:
    return ZenviaSettings(
        sms_send_url=os.getenv("ZENVIA_SMS_SEND_URL", ZENVIA_SMS_SEND_URL),
        whatsapp_send_url=os.getenv("ZENVIA_WHATSAPP_SEND_URL", ZENVIA_WHATSAPP_SEND_URL),
    )


@lru_cache(maxsize=1)
def get_zenvia_settings() -> ZenviaSettings:
    """Retorna instância cacheada de ZenviaSettings."""
    return _load_from_env()
