"""Connectors por canal — adapters de borda para serviços externos.

Estrutura:
- whatsapp/: bridge whatsapp-web.js (envio, sessão, mídia por URL)
"""

__all__: list[str] = []
