"""Normalizers por provedor: payload externo para modelo canônico.

Estrutura:
- freshchat/: mensagens FreshChat (texto + imagens)
- zenvia/: MO e callbacks de status da Zenvia SMS
- zenvia_whatsapp/: mensagens e status da Zenvia WhatsApp (fan-out por conteúdo)
- slack/: envelopes de Events API (url_verification, event_callback)

Cada provedor tem seus próprios modelos pydantic e normalizer.
"""
