"""Download de mídia por URL para o formato MessageMedia."""

from __future__ import annotations

import base64
import logging
import mimetypes
from urllib.parse import unquote, urlparse

import httpx

from app.protocols.models import MessageMedia
from utils.errors import DeliveryFailureError

logger = logging.getLogger(__name__)


def resolve_mime_type(content_type: str | None, url: str) -> str | None:
    """Resolve MIME pelo header Content-Type ou, na falta dele, pela URL."""
    if content_type:
        mime = content_type.split(";", 1)[0].strip().lower()
        if mime:
            return mime
    guessed, _ = mimetypes.guess_type(urlparse(url).path)
    return guessed


def filename_from_url(url: str) -> str | None:
    """Último segmento do path da URL (None se vazio)."""
    segment = urlparse(url).path.rsplit("/", 1)[-1]
    return unquote(segment) or None


class MediaDownloader:
    """Baixa mídia por URL respeitando limite de tamanho.

    Args:
        timeout_seconds: Timeout total do download.
        max_size_bytes: Tamanho máximo aceito.
        transport: Transport httpx opcional (testes).
    """

    def __init__(
        self,
        timeout_seconds: float,
        max_size_bytes: int,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout_seconds
        self._max_size_bytes = max_size_bytes
        self._transport = transport

    async def download(self, url: str) -> MessageMedia:
        """Baixa a URL e devolve mídia em base64.

        Raises:
            DeliveryFailureError: URL inválida, status de erro, mídia grande
                demais ou MIME indeterminável.
        """
        if urlparse(url).scheme not in ("http", "https"):
            raise DeliveryFailureError("media_url_invalid")

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._timeout,
                follow_redirects=True,
            ) as client:
                async with client.stream("GET", url) as response:
                    if response.status_code >= 400:
                        raise DeliveryFailureError(f"media_http_{response.status_code}")
                    content = await self._read_limited(response)
                    content_type = response.headers.get("content-type")
        except httpx.TimeoutException as exc:
            raise DeliveryFailureError("media_timeout") from exc
        except httpx.HTTPError as exc:
            raise DeliveryFailureError("media_download_failed") from exc

        mime_type = resolve_mime_type(content_type, url)
        if not mime_type:
            raise DeliveryFailureError("media_mime_unknown")

        logger.debug(
            "media_downloaded",
            extra={"mime_type": mime_type, "size_bytes": len(content)},
        )
        return MessageMedia(
            mimetype=mime_type,
            data=base64.b64encode(content).decode("ascii"),
            filename=filename_from_url(url),
            filesize=len(content),
        )

    async def _read_limited(self, response: httpx.Response) -> bytes:
        content_length = response.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self._max_size_bytes:
            raise DeliveryFailureError("media_too_large")

        chunks: list[bytes] = []
        received = 0
        async for chunk in response.aiter_bytes():
            received += len(chunk)
            if received > self._max_size_bytes:
                raise DeliveryFailureError("media_too_large")
            chunks.append(chunk)
        return b"".join(chunks)
