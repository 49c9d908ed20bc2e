"""Cliente HTTP base para chamadas aos provedores.

Sem retries: retry/backoff é responsabilidade do backend/fila. Cada chamada
devolve um `RequestResponse` (snapshot para ChannelLog) mesmo em status
não-2xx; apenas falhas de transporte viram `NetworkError`.
"""

from __future__ import annotations

import json as jsonlib
import logging
import time
from dataclasses import dataclass, field
from typing import Any

import httpx

from utils.errors import NetworkError
from utils.text import decode_utf8

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


@dataclass(frozen=True, slots=True)
class RequestResponse:
    """Snapshot de uma troca HTTP (sem headers, que carregam credenciais)."""

    method: str
    url: str
    status_code: int
    request_body: str
    response_body: bytes
    elapsed_ms: float

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return decode_utf8(self.response_body)

    def json(self) -> Any:
        """Decodifica corpo da resposta como JSON (None se inválido)."""
        try:
            return jsonlib.loads(self.response_body or b"null")
        except ValueError:
            return None


class HttpClient:
    """Cliente HTTP simples para chamadas externas."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def get(
        self,
        url: str,
        *,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> RequestResponse:
        return await self._request("GET", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        *,
        json: Any = None,
        data: dict[str, str] | None = None,
        files: dict[str, tuple[str, bytes]] | None = None,
        headers: dict[str, str] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> RequestResponse:
        return await self._request(
            "POST",
            url,
            json=json,
            data=data,
            files=files,
            headers=headers,
            auth=auth,
        )

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
        data: dict[str, str] | None = None,
        files: dict[str, tuple[str, bytes]] | None = None,
        headers: dict[str, str] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> RequestResponse:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        request_body = _request_snapshot(json=json, data=data, files=files)
        started_at = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._config.transport,
                timeout=self._config.timeout_seconds,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    data=data,
                    files=files,
                    headers=merged_headers,
                    auth=auth,
                )
        except httpx.HTTPError as exc:
            elapsed_ms = (time.perf_counter() - started_at) * 1000
            logger.warning(
                "http_transport_error",
                extra={"method": method, "error_type": type(exc).__name__},
            )
            raise NetworkError(
                f"unable to connect to server: {type(exc).__name__}",
                reason="http_connection_error",
                request_response=RequestResponse(
                    method=method,
                    url=url,
                    status_code=0,
                    request_body=request_body,
                    response_body=b"",
                    elapsed_ms=round(elapsed_ms, 2),
                ),
            ) from exc

        elapsed_ms = (time.perf_counter() - started_at) * 1000
        logger.debug(
            "http_request_completed",
            extra={"method": method, "status_code": response.status_code},
        )
        return RequestResponse(
            method=method,
            url=str(response.request.url),
            status_code=response.status_code,
            request_body=request_body,
            response_body=response.content,
            elapsed_ms=round(elapsed_ms, 2),
        )


def _request_snapshot(
    *,
    json: Any,
    data: dict[str, str] | None,
    files: dict[str, tuple[str, bytes]] | None,
) -> str:
    if files:
        names = ", ".join(name for name, _ in files.values())
        return f"multipart/form-data files=[{names}] fields={sorted((data or {}).keys())}"
    if json is not None:
        return jsonlib.dumps(json, ensure_ascii=False)
    if data:
        return jsonlib.dumps(data, ensure_ascii=False)
    return ""
