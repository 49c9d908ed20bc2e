"""Payload builders por provedor: mensagem canônica para partes outbound.

Estrutura:
- freshchat/: request único com partes texto e imagem
- zenvia/: sendSmsRequest, texto dividido em 150 caracteres
- zenvia_whatsapp/: um content por parte (arquivos antes do texto)
- slack/: chat.postMessage e formulário de files.upload

Cada provedor tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""
