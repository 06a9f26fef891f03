"""API — camada de borda HTTP e adapter do WhatsApp Web.

Subpastas:
- connectors/: cliente do bridge whatsapp-web.js
- normalizers/: número de telefone → endereço do adapter
- payload_builders/: conteúdo e opções de envio por tipo de mensagem
- validators/: presença de campos obrigatórios
- routes/: endpoints HTTP (envio, health)

NÃO PODE conter: ciclo de vida da sessão, orquestração de use cases.
"""
