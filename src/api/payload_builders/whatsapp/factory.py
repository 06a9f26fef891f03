"""Factory para obter o builder correto por tipo de mensagem."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.whatsapp.base import PayloadBuilder
from api.payload_builders.whatsapp.media import FilePayloadBuilder, ImagePayloadBuilder
from api.payload_builders.whatsapp.text import TextPayloadBuilder
from app.constants.whatsapp import MessageKind

if TYPE_CHECKING:
    from app.protocols.messaging_client import MessagingClientProtocol
    from app.protocols.models import OutboundPayload, OutboundRequest

# Mapeamento de tipo de mensagem para builder
_BUILDERS: dict[MessageKind, PayloadBuilder] = {
    MessageKind.TEXT: TextPayloadBuilder(),
    MessageKind.IMAGE: ImagePayloadBuilder(),
    MessageKind.FILE: FilePayloadBuilder(),
}


def get_payload_builder(kind: MessageKind) -> PayloadBuilder | None:
    """Retorna o builder para o tipo de mensagem (None se não suportado)."""
    return _BUILDERS.get(kind)


async def build_full_payload(
    request: OutboundRequest,
    client: MessagingClientProtocol,
) -> OutboundPayload:
    """Constrói o payload de envio para a requisição.

    Raises:
        ValueError: Se tipo de mensagem não suportado
        DeliveryFailureError: Se a construção de mídia falhar no adapter
    """
    builder = get_payload_builder(request.kind)
    if builder is None:
        raise ValueError(f"Tipo de mensagem não suportado: {request.kind}")
    return await builder.build(request, client)
