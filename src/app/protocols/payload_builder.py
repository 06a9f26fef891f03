"""Protocolos de construção de payload outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .messaging_client import MessagingClientProtocol
    from .models import OutboundPayload, OutboundRequest


class PayloadBuilderProtocol(Protocol):
    """Contrato mínimo para construir payloads de envio.

    Assíncrono porque mídia por URL é baixada pelo adapter.
    """

    async def build_full_payload(
        self,
        request: OutboundRequest,
        client: MessagingClientProtocol,
    ) -> OutboundPayload: ...
