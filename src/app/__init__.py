"""App: núcleo do gateway: domínio canônico, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelo canônico (canal, URN, mensagens, status, logs de canal)
- registry/: registro de adapters por tipo de canal
- use_cases/: entry points inbound e outbound
- infra/: implementações concretas de IO (HTTP, crypto, stores)
- protocols/: contratos/interfaces (backend, servidor, adapter)
- observability/: correlation id e métricas via logs

Padrão: app executa; api adapta; utils apoia.
"""
