"""Builder para mensagens de texto."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.protocols.models import OutboundPayload

if TYPE_CHECKING:
    from app.protocols.messaging_client import MessagingClientProtocol
    from app.protocols.models import OutboundTextRequest


class TextPayloadBuilder:
    """Builder para mensagens de texto simples (conteúdo é a própria string)."""

    async def build(
        self,
        request: OutboundTextRequest,
        client: MessagingClientProtocol,
    ) -> OutboundPayload:
        return OutboundPayload(content=request.message or "")
