"""Sessão WhatsApp Web — estado observado, monitor e pareamento."""

from app.sessions.lifecycle import WhatsAppWebSession
from app.sessions.monitor import SessionMonitor
from app.sessions.pairing import TerminalPairingListener, render_qr

__all__ = [
    "SessionMonitor",
    "TerminalPairingListener",
    "WhatsAppWebSession",
    "render_qr",
]
