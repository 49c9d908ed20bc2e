"""Rotas HTTP da API.

Responsabilidades:
- Bufferizar o corpo do webhook e montar `InboundRequest`
- Escopo de correlation_id por requisição
- Delegação para `app.use_cases.channels`
- Health checks e readiness

Estrutura:
- routes/channels/: `POST /c/{code}/{channel_uuid}/{action}` e `ChannelServer`
- routes/health/: health checks e readiness
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
