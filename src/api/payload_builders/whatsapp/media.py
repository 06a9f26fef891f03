"""Builders para mensagens de mídia (imagem por URL, arquivo em base64)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.protocols.models import MessageMedia, OutboundPayload
from config.settings import FILE_MIME_TYPE

if TYPE_CHECKING:
    from app.protocols.messaging_client import MessagingClientProtocol
    from app.protocols.models import OutboundFileRequest, OutboundImageRequest


class ImagePayloadBuilder:
    """Builder de imagem: o adapter baixa a mídia a partir da URL."""

    async def build(
        self,
        request: OutboundImageRequest,
        client: MessagingClientProtocol,
    ) -> OutboundPayload:
        """Baixa a imagem via adapter e anexa caption quando informada.

        Raises:
            DeliveryFailureError: Se o download ou a detecção de MIME falhar
        """
        media = await client.media_from_url(request.image_url or "")
        options: dict[str, Any] = {}
        if request.caption:
            options["caption"] = request.caption
        return OutboundPayload(content=media, options=options)


class FilePayloadBuilder:
    """Builder de arquivo em base64.

    O content-type é sempre FILE_MIME_TYPE (application/pdf), mesmo
    quando a extensão do filename indica outro formato.
    """

    async def build(
        self,
        request: OutboundFileRequest,
        client: MessagingClientProtocol,
    ) -> OutboundPayload:
        media = MessageMedia(
            mimetype=FILE_MIME_TYPE,
            data=request.base64 or "",
            filename=request.filename,
        )
        return OutboundPayload(content=media)
