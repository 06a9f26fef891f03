"""Factory de wiring para WhatsApp Web (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.bootstrap.whatsapp_adapters import (
    WhatsAppWebAddressNormalizer,
    WhatsAppWebOutboundValidator,
    WhatsAppWebPayloadBuilder,
)
from app.sessions import SessionMonitor, TerminalPairingListener, WhatsAppWebSession
from app.use_cases.whatsapp.send_outbound_message import SendOutboundMessageUseCase
from config.settings import get_whatsapp_web_settings

if TYPE_CHECKING:
    from api.connectors.whatsapp import WhatsAppWebClient
    from app.protocols.messaging_client import MessagingClientProtocol, SessionClientProtocol


def create_whatsapp_web_client() -> WhatsAppWebClient:
    """Cria o adapter concreto (cliente do bridge whatsapp-web.js).

    Import local para respeitar boundaries (wiring no bootstrap).
    """
    from api.connectors.whatsapp import WhatsAppWebClient

    return WhatsAppWebClient(get_whatsapp_web_settings())


def create_send_outbound_use_case(
    client: MessagingClientProtocol,
) -> SendOutboundMessageUseCase:
    """Cria use case outbound com dependências injetadas."""
    return SendOutboundMessageUseCase(
        validator=WhatsAppWebOutboundValidator(),
        normalizer=WhatsAppWebAddressNormalizer(),
        builder=WhatsAppWebPayloadBuilder(),
        client=client,
    )


def create_session_monitor(
    client: SessionClientProtocol,
    session: WhatsAppWebSession | None = None,
) -> tuple[WhatsAppWebSession, SessionMonitor]:
    """Cria sessão observada (com listener de terminal) e seu monitor."""
    session = session or WhatsAppWebSession()
    session.subscribe(TerminalPairingListener())
    monitor = SessionMonitor(
        client=client,
        session=session,
        poll_seconds=get_whatsapp_web_settings().session_poll_seconds,
    )
    return session, monitor
