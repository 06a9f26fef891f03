"""Fakes do adapter WhatsApp Web para testes."""

from __future__ import annotations

from typing import Any

from app.constants.whatsapp import SessionState
from app.protocols.models import MessageMedia, SessionStatus
from utils.errors import DeliveryFailureError


class FakeMessagingClient:
    """Adapter fake que registra chamadas e pode falhar sob demanda."""

    def __init__(
        self,
        *,
        fail_send: Exception | None = None,
        fail_media: Exception | None = None,
        message_id: str | None = "true_573001234567@c.us_ABC",
        media: MessageMedia | None = None,
    ) -> None:
        self._fail_send = fail_send
        self._fail_media = fail_media
        self._message_id = message_id
        self._media = media or MessageMedia(
            mimetype="image/jpeg",
            data="aW1hZ2U=",
            filename="image.jpg",
            filesize=5,
        )
        self.sent: list[tuple[str, str | MessageMedia, dict[str, Any] | None]] = []
        self.media_urls: list[str] = []

    async def send_message(
        self,
        chat_id: str,
        content: str | MessageMedia,
        options: dict[str, Any] | None = None,
    ) -> str | None:
        if self._fail_send is not None:
            raise self._fail_send
        self.sent.append((chat_id, content, options))
        return self._message_id

    async def media_from_url(self, url: str) -> MessageMedia:
        self.media_urls.append(url)
        if self._fail_media is not None:
            raise self._fail_media
        return self._media


class FakeSessionClient:
    """Adapter de sessão fake que devolve status em sequência."""

    def __init__(
        self,
        statuses: list[SessionStatus] | None = None,
        *,
        fail_initialize: int = 0,
    ) -> None:
        self._statuses = list(statuses or [SessionStatus(state=SessionState.READY)])
        self._fail_initialize = fail_initialize
        self.initialize_calls = 0
        self.status_calls = 0

    async def initialize(self) -> None:
        self.initialize_calls += 1
        if self.initialize_calls <= self._fail_initialize:
            raise DeliveryFailureError("bridge_unreachable")

    async def get_session_status(self) -> SessionStatus:
        self.status_calls += 1
        if len(self._statuses) > 1:
            return self._statuses.pop(0)
        return self._statuses[0]
