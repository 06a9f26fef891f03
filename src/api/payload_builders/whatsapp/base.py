"""Contrato comum dos builders de payload WhatsApp Web."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.protocols.messaging_client import MessagingClientProtocol
    from app.protocols.models import OutboundPayload, OutboundRequest


class PayloadBuilder(Protocol):
    """Builder de um tipo de mensagem."""

    async def build(
        self,
        request: OutboundRequest,
        client: MessagingClientProtocol,
    ) -> OutboundPayload: ...
