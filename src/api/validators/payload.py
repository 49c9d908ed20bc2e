"""Decode e validação estrutural de payloads de webhook."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from utils.errors import ValidationError

if TYPE_CHECKING:
    from typing import BinaryIO

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_and_validate(model: type[ModelT], body: BinaryIO) -> ModelT:
    """Decodifica JSON do leitor e valida contra o schema do provedor.

    Args:
        model: Schema pydantic do payload
        body: Leitor sobre o corpo bruto (não compartilhado com outra etapa)

    Raises:
        ValidationError: JSON inválido, payload não-objeto ou campo obrigatório ausente.
    """
    try:
        data = json.loads(body.read() or b"null")
    except (ValueError, UnicodeDecodeError) as exc:
        raise ValidationError("unable to parse request JSON", reason="invalid_json") from exc

    if not isinstance(data, dict):
        raise ValidationError("request JSON must be an object", reason="payload_not_object")

    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(_describe(exc), reason="invalid_payload") from exc


def _describe(exc: PydanticValidationError) -> str:
    """Resumo dos campos inválidos (sem valores, que podem conter PII)."""
    fields = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        fields.append(f"'{location}' {error.get('type', 'invalid')}")
    return "validation failed: " + ", ".join(fields)
