"""Rotas WhatsApp Web."""

from api.routes.whatsapp.router import router

__all__ = ["router"]
