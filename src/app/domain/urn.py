"""URN canônica: endereço de remetente/destinatário (scheme + path)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from utils.errors import ValidationError

TEL_SCHEME = "tel"
WHATSAPP_SCHEME = "whatsapp"
SLACK_SCHEME = "slack"
FRESHCHAT_SCHEME = "freshchat"

_SCHEME_RE = re.compile(r"^[a-z][a-z0-9-]*$")
_PHONE_STRIP_RE = re.compile(r"[\s\-().]")

# Códigos de discagem dos países atendidos
COUNTRY_CALLING_CODES: dict[str, str] = {
    "AR": "54",
    "BR": "55",
    "CL": "56",
    "CO": "57",
    "EC": "593",
    "MX": "52",
    "PE": "51",
    "PT": "351",
    "PY": "595",
    "US": "1",
    "UY": "598",
}

# Maior número nacional (sem código do país) por país
NATIONAL_NUMBER_MAX_LENGTHS: dict[str, int] = {
    "AR": 11,
    "BR": 11,
    "CL": 9,
    "CO": 10,
    "EC": 9,
    "MX": 10,
    "PE": 9,
    "PT": 9,
    "PY": 9,
    "US": 10,
    "UY": 8,
}


@dataclass(frozen=True, slots=True)
class URN:
    """Endereço canônico. Igualdade considera apenas scheme e path."""

    scheme: str
    path: str
    display: str = field(default="", compare=False)

    def __str__(self) -> str:
        return f"{self.scheme}:{self.path}"

    @classmethod
    def from_parts(cls, scheme: str, path: str, display: str = "") -> URN:
        """Cria URN validando scheme e path.

        Raises:
            ValidationError: Se scheme for inválido ou path vazio.
        """
        if not _SCHEME_RE.match(scheme or ""):
            raise ValidationError(f"invalid urn scheme: {scheme!r}", reason="invalid_urn")
        if not path:
            raise ValidationError("urn path must not be empty", reason="invalid_urn")
        return cls(scheme=scheme, path=path, display=display)

    @classmethod
    def parse(cls, value: str) -> URN:
        """Converte `scheme:path` em URN."""
        scheme, sep, path = value.partition(":")
        if not sep:
            raise ValidationError(f"invalid urn: {value!r}", reason="invalid_urn")
        return cls.from_parts(scheme, path)


def new_tel_urn_for_country(number: str, country: str | None) -> URN:
    """Cria URN `tel` normalizando o número para o país do canal.

    Números com prefixo `+`, ou iniciados pelo código do país e mais longos
    que o maior número nacional, viram E.164 (`+<digits>`). Os demais recebem
    o código do país. Sem país conhecido, os dígitos são mantidos como estão.
    """
    cleaned = _PHONE_STRIP_RE.sub("", number or "")
    has_plus = cleaned.startswith("+")
    digits = cleaned.lstrip("+")
    if not digits.isdigit():
        raise ValidationError("invalid phone number", reason="invalid_urn")

    if has_plus:
        return URN.from_parts(TEL_SCHEME, f"+{digits}")

    country_code = (country or "").upper()
    calling_code = COUNTRY_CALLING_CODES.get(country_code)
    if calling_code is None:
        return URN.from_parts(TEL_SCHEME, digits)
    national_max = NATIONAL_NUMBER_MAX_LENGTHS[country_code]
    if digits.startswith(calling_code) and len(digits) > national_max:
        return URN.from_parts(TEL_SCHEME, f"+{digits}")
    return URN.from_parts(TEL_SCHEME, f"+{calling_code}{digits.lstrip('0')}")


def new_whatsapp_urn(number: str) -> URN:
    """Cria URN `whatsapp` (apenas dígitos, sem `+`)."""
    digits = (number or "").lstrip("+")
    if not digits.isdigit():
        raise ValidationError("invalid whatsapp id", reason="invalid_urn")
    return URN.from_parts(WHATSAPP_SCHEME, digits)
