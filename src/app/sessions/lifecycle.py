"""Ciclo de vida da sessão WhatsApp Web.

Estados: UNINITIALIZED -> AWAITING_PAIRING -> READY. O estado real é do
bridge; este objeto guarda o último estado observado e notifica os
listeners inscritos quando ele muda.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.constants.whatsapp import SessionState

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.models import SessionStatus

    SessionListener = Callable[[SessionState, str | None], None]

logger = logging.getLogger(__name__)


class WhatsAppWebSession:
    """Estado observado da sessão com subscribe/notify."""

    def __init__(self) -> None:
        self._state = SessionState.UNINITIALIZED
        self._qr: str | None = None
        self._listeners: list[SessionListener] = []

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def qr(self) -> str | None:
        """Último código de pareamento (só em AWAITING_PAIRING)."""
        return self._qr

    @property
    def is_ready(self) -> bool:
        return self._state is SessionState.READY

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Inscreve listener; retorna função que cancela a inscrição."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def update(self, status: SessionStatus) -> bool:
        """Aplica status observado.

        Notifica apenas em mudança de estado ou novo QR code.

        Returns:
            True se houve mudança.
        """
        qr = status.qr if status.state is SessionState.AWAITING_PAIRING else None
        changed = status.state is not self._state or (qr is not None and qr != self._qr)
        if not changed:
            return False

        previous = self._state
        self._state = status.state
        self._qr = qr
        logger.info(
            "whatsapp_web_session_changed",
            extra={"previous_state": previous.value, "state": status.state.value},
        )
        self._notify()
        return True

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state, self._qr)
            except Exception:
                logger.exception("session_listener_failed")
