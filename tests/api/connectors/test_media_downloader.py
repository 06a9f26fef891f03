"""Testes do download de mídia por URL."""

from __future__ import annotations

import base64

import httpx
import pytest

from api.connectors.whatsapp import MediaDownloader, filename_from_url, resolve_mime_type
from utils.errors import DeliveryFailureError


def _downloader(handler, max_size_bytes: int = 1024) -> MediaDownloader:
    return MediaDownloader(
        timeout_seconds=5,
        max_size_bytes=max_size_bytes,
        transport=httpx.MockTransport(handler),
    )


class TestHelpers:
    """Testes de resolve_mime_type e filename_from_url."""

    def test_mime_from_content_type_header(self) -> None:
        assert resolve_mime_type("image/PNG; charset=binary", "https://x.test/a") == "image/png"

    def test_mime_falls_back_to_extension(self) -> None:
        assert resolve_mime_type(None, "https://x.test/foto.jpg?size=large") == "image/jpeg"

    def test_mime_unknown(self) -> None:
        assert resolve_mime_type("", "https://x.test/blob") is None

    def test_filename_from_url(self) -> None:
        assert filename_from_url("https://x.test/dir/mi%20foto.png") == "mi foto.png"
        assert filename_from_url("https://x.test/") is None


class TestMediaDownloader:
    """Testes para MediaDownloader.download."""

    @pytest.mark.asyncio
    async def test_download_returns_base64_media(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"imagen", headers={"content-type": "image/png"})

        media = await _downloader(handler).download("https://cdn.test/img/a.png")

        assert media.mimetype == "image/png"
        assert base64.b64decode(media.data) == b"imagen"
        assert media.filename == "a.png"
        assert media.filesize == 6

    @pytest.mark.asyncio
    async def test_rejects_non_http_url(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("não deveria chamar a rede")

        with pytest.raises(DeliveryFailureError) as exc_info:
            await _downloader(handler).download("file:///etc/passwd")
        assert exc_info.value.reason == "media_url_invalid"

    @pytest.mark.asyncio
    async def test_error_status(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404)

        with pytest.raises(DeliveryFailureError) as exc_info:
            await _downloader(handler).download("https://cdn.test/missing.png")
        assert exc_info.value.reason == "media_http_404"

    @pytest.mark.asyncio
    async def test_too_large(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"x" * 2048, headers={"content-type": "image/png"})

        with pytest.raises(DeliveryFailureError) as exc_info:
            await _downloader(handler, max_size_bytes=1024).download("https://cdn.test/big.png")
        assert exc_info.value.reason == "media_too_large"

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(DeliveryFailureError) as exc_info:
            await _downloader(handler).download("https://cdn.test/a.png")
        assert exc_info.value.reason == "media_timeout"

    @pytest.mark.asyncio
    async def test_unknown_mime(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"??")

        with pytest.raises(DeliveryFailureError) as exc_info:
            await _downloader(handler).download("https://cdn.test/blob")
        assert exc_info.value.reason == "media_mime_unknown"
