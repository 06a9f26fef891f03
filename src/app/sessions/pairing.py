"""Exibição do QR code de pareamento no terminal do operador."""

from __future__ import annotations

import io
import logging
import sys
from typing import TextIO

import qrcode

from app.constants.whatsapp import SessionState

logger = logging.getLogger(__name__)

SCAN_PROMPT = "Escanea este código QR:"
READY_TEXT = "WhatsApp Web listo para enviar mensajes"


def render_qr(code: str) -> str:
    """Renderiza o código como QR em ASCII (compacto, para terminal)."""
    qr = qrcode.QRCode(border=1)
    qr.add_data(code)
    qr.make(fit=True)
    buffer = io.StringIO()
    qr.print_ascii(out=buffer, invert=True)
    return buffer.getvalue()


class TerminalPairingListener:
    """Listener de sessão que escreve QR e aviso de pronto no terminal.

    O QR vai para o stream (não para os logs JSON) porque precisa ser
    escaneado por um humano.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def __call__(self, state: SessionState, qr: str | None) -> None:
        stream = self._stream or sys.stdout
        if state is SessionState.AWAITING_PAIRING and qr:
            logger.info("whatsapp_web_awaiting_pairing")
            stream.write(f"{SCAN_PROMPT}\n{render_qr(qr)}\n")
            stream.flush()
        elif state is SessionState.READY:
            logger.info("whatsapp_web_ready")
            stream.write(f"{READY_TEXT}\n")
            stream.flush()
