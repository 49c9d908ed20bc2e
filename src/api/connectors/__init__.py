"""Connectors por provedor: adapters registrados no `AdapterRegistry`.

Estrutura:
- freshchat/: FreshChat (FC)
- zenvia/: Zenvia SMS (ZV)
- zenvia_whatsapp/: Zenvia WhatsApp (ZW)
- slack/: Slack (SL)
- outbound.py: pipeline compartilhado de envio multi-parte

Cada provedor tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""
