"""API: camada de borda e adapters de provedores.

Responsabilidades:
- Receber webhooks dos provedores
- Validar assinaturas e payloads
- Normalizar dados para o modelo canônico
- Construir payloads para as APIs dos provedores
- Enviar partes outbound e mapear status

Subpastas:
- connectors/: um adapter por provedor (rotas inbound + envio)
- normalizers/: payload do provedor -> mensagens/status canônicos
- payload_builders/: mensagem canônica -> partes/requests do provedor
- status_mappers/: vocabulário de status do provedor -> status canônico
- validators/: decode JSON + validação de schema
- routes/: endpoints HTTP (webhooks, health)

NÃO PODE conter: persistência, retry/backoff, filas.
"""
