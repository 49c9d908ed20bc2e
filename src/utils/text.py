"""Helpers de texto compartilhados pelos adapters."""

from __future__ import annotations


def split_text(text: str, max_length: int) -> list[str]:
    """Divide texto em partes de até `max_length` caracteres.

    Corta preferencialmente após uma quebra de linha (quando ela está na
    segunda metade da janela) e depois após espaço em branco. Palavras maiores
    que o limite são cortadas no limite. Nenhum caractere é removido ou
    duplicado: `"".join(split_text(t, n)) == t`.

    Raises:
        ValueError: Se max_length não for positivo.
    """
    if max_length <= 0:
        raise ValueError("max_length deve ser > 0")
    if not text:
        return []

    parts: list[str] = []
    start = 0
    while len(text) - start > max_length:
        end = start + max_length
        if text[end].isspace():
            cut = max_length
        else:
            cut = _find_boundary(text[start:end]) or max_length
        parts.append(text[start : start + cut])
        start += cut
    parts.append(text[start:])
    return parts


def _find_boundary(window: str) -> int:
    """Retorna posição de corte (após o separador) ou 0 se não houver."""
    newline = window.rfind("\n")
    if newline >= len(window) // 2:
        return newline + 1
    space = max(window.rfind(" "), window.rfind("\t"), newline)
    if space > 0:
        return space + 1
    return 0


def join_non_empty(delimiter: str, *values: str) -> str:
    """Junta apenas os valores não vazios com o delimitador."""
    return delimiter.join(value for value in values if value)


def split_attachment(attachment: str) -> tuple[str, str]:
    """Separa anexo no formato `mime/type:url` em (mime_type, url).

    URLs sem prefixo de content-type retornam mime_type vazio.
    """
    prefix, sep, rest = attachment.partition(":")
    if sep and "/" in prefix and not rest.startswith("//"):
        return prefix, rest
    return "", attachment


def decode_utf8(data: bytes) -> str:
    """Decodifica bytes como UTF-8 descartando sequências inválidas."""
    return data.decode("utf-8", errors="ignore")
