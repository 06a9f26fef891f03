"""Cliente do bridge whatsapp-web.js (adapter de mensageria).

O bridge é um processo Node.js que mantém a sessão WhatsApp Web (pareamento
por QR code, browser headless, persistência de auth). Este cliente conhece
apenas a API HTTP do bridge:

- POST /session/initialize — inicia o cliente WhatsApp Web
- GET  /session            — {"state": ..., "qr": ...}
- POST /messages           — {"chatId", "content", "options"} -> {"id"}

Nunca registra números, textos ou conteúdo de mídia nos logs.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.whatsapp.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.whatsapp.media import MediaDownloader
from app.constants.whatsapp import SessionState
from app.protocols.models import MessageMedia, SessionStatus
from config.settings import get_whatsapp_web_settings
from utils.errors import DeliveryFailureError

if TYPE_CHECKING:
    import httpx

    from config.settings import WhatsAppWebSettings

logger: logging.Logger = logging.getLogger(__name__)


def serialize_content(content: str | MessageMedia) -> dict[str, Any]:
    """Converte conteúdo de envio no formato JSON do bridge."""
    if isinstance(content, MessageMedia):
        return {
            "type": "media",
            "mimetype": content.mimetype,
            "data": content.data,
            "filename": content.filename,
        }
    return {"type": "text", "body": content}


def parse_session_status(data: Any) -> SessionStatus:
    """Converte resposta de GET /session; estados desconhecidos viram UNINITIALIZED."""
    if not isinstance(data, dict):
        return SessionStatus(state=SessionState.UNINITIALIZED)
    raw_state = str(data.get("state") or "").upper()
    try:
        state = SessionState(raw_state)
    except ValueError:
        state = SessionState.UNINITIALIZED
    qr = data.get("qr")
    return SessionStatus(state=state, qr=qr if isinstance(qr, str) and qr else None)


class WhatsAppWebClient:
    """Adapter WhatsApp Web via bridge HTTP.

    Implementa MessagingClientProtocol e SessionClientProtocol.
    """

    def __init__(
        self,
        settings: WhatsAppWebSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or get_whatsapp_web_settings()
        headers = {"Accept": "application/json"}
        if self._settings.bridge_token:
            headers["Authorization"] = f"Bearer {self._settings.bridge_token}"
        self._http = HttpClient(
            HttpClientConfig(
                timeout_seconds=self._settings.request_timeout_seconds,
                default_headers=headers,
            ),
            transport=transport,
        )
        self._media = MediaDownloader(
            timeout_seconds=self._settings.media_timeout_seconds,
            max_size_bytes=self._settings.media_max_size_bytes,
            transport=transport,
        )

    async def initialize(self) -> None:
        """Pede ao bridge para iniciar o cliente WhatsApp Web."""
        await self._http.post(self._settings.get_endpoint("/session/initialize"))
        logger.info("whatsapp_web_initialize_requested")

    async def get_session_status(self) -> SessionStatus:
        """Consulta o estado atual da sessão no bridge."""
        response = await self._http.get(self._settings.get_endpoint("/session"))
        try:
            return parse_session_status(response.json())
        except json.JSONDecodeError as exc:
            raise HttpError("session_response_invalid_json") from exc

    async def send_message(
        self,
        chat_id: str,
        content: str | MessageMedia,
        options: dict[str, Any] | None = None,
    ) -> str | None:
        """Envia texto ou mídia para o endereço informado.

        Returns:
            ID da mensagem retornado pelo bridge (quando houver)

        Raises:
            DeliveryFailureError: Qualquer falha HTTP ou resposta inválida
        """
        payload = {
            "chatId": chat_id,
            "content": serialize_content(content),
            "options": options or {},
        }
        try:
            response = await self._http.post(
                self._settings.get_endpoint("/messages"),
                json=payload,
            )
        except HttpError as exc:
            reason = f"bridge_http_{exc.status_code}" if exc.status_code else str(exc)
            raise DeliveryFailureError(reason) from exc

        try:
            data = response.json()
        except json.JSONDecodeError as exc:
            raise DeliveryFailureError("bridge_invalid_json") from exc

        message_id = data.get("id") if isinstance(data, dict) else None
        return str(message_id) if message_id else None

    async def media_from_url(self, url: str) -> MessageMedia:
        """Constrói mídia baixando a URL (MIME via header ou extensão)."""
        return await self._media.download(url)
