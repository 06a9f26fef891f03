"""Conector WhatsApp Web — adapter de borda para o bridge whatsapp-web.js.

Este módulo é o único ponto de IO para o canal WhatsApp:
- Cliente HTTP do bridge (envio, sessão)
- Download de mídia por URL
"""

from .client import WhatsAppWebClient, parse_session_status, serialize_content
from .http_base import HttpClient, HttpClientConfig, HttpError
from .media import MediaDownloader, filename_from_url, resolve_mime_type

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "MediaDownloader",
    "WhatsAppWebClient",
    "filename_from_url",
    "parse_session_status",
    "resolve_mime_type",
    "serialize_content",
]
