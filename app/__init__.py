"""Pacote webapp modular para o proxy Sentry -> Google Chat.

Este pacote contém:
- constants: variáveis de ambiente e mapas de configuração
- models: evento de erro normalizado e esquema da mensagem do Google Chat
- utils: utilitários de formatação e helpers
- adapters: normalização dos formatos de webhook do Sentry
- detection: emojis de nível/prioridade e filtro de action
- formatters: montagem da mensagem (texto simples ou card)
- services: integração com serviços externos (Google Chat)
- controller: criação do Flask app e endpoints
"""
