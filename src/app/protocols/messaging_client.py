"""Protocolos do adapter de mensageria (cliente WhatsApp Web)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import MessageMedia, SessionStatus


class MessagingClientProtocol(Protocol):
    """Primitivas de envio e construção de mídia do adapter.

    Implementações levantam DeliveryFailureError em qualquer falha.
    """

    async def send_message(
        self,
        chat_id: str,
        content: str | MessageMedia,
        options: dict[str, Any] | None = None,
    ) -> str | None: ...

    async def media_from_url(self, url: str) -> MessageMedia: ...


class SessionClientProtocol(Protocol):
    """Controle do ciclo de vida da sessão do adapter."""

    async def initialize(self) -> None: ...

    async def get_session_status(self) -> SessionStatus: ...
