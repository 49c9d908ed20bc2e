"""Status mappers: tabelas fixas de status por provedor."""

from .base import StatusMapper
from .zenvia import ZENVIA_SMS_STATUS, ZENVIA_WHATSAPP_STATUS

__all__ = [
    "ZENVIA_SMS_STATUS",
    "ZENVIA_WHATSAPP_STATUS",
    "StatusMapper",
]
