"""Monitor de sessão: inicializa o adapter e acompanha o estado por polling."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols.messaging_client import SessionClientProtocol
    from app.sessions.lifecycle import WhatsAppWebSession

logger = logging.getLogger(__name__)


class SessionMonitor:
    """Task de background desacoplada do tratamento das requisições HTTP.

    Args:
        client: Adapter com initialize/get_session_status.
        session: Estado observado a atualizar.
        poll_seconds: Intervalo entre consultas.
    """

    def __init__(
        self,
        client: SessionClientProtocol,
        session: WhatsAppWebSession,
        poll_seconds: float,
    ) -> None:
        self._client = client
        self._session = session
        self._poll_seconds = poll_seconds
        self._initialized = False
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Agenda o loop de monitoramento no event loop atual."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="whatsapp-web-session-monitor")
        logger.info("session_monitor_started", extra={"poll_seconds": self._poll_seconds})

    async def stop(self) -> None:
        """Cancela o loop e aguarda o término."""
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("session_monitor_stopped")

    async def poll_once(self) -> None:
        """Inicializa o adapter (se preciso) e aplica o status atual."""
        if not self._initialized:
            await self._client.initialize()
            self._initialized = True
        status = await self._client.get_session_status()
        self._session.update(status)

    async def _run(self) -> None:
        while True:
            try:
                await self.poll_once()
            except Exception as exc:
                logger.warning(
                    "session_poll_failed",
                    extra={
                        "error_type": type(exc).__name__,
                        "initialized": self._initialized,
                    },
                )
            await asyncio.sleep(self._poll_seconds)
