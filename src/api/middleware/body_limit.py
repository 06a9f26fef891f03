"""Middleware ASGI de limite de tamanho do corpo da requisição."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.responses import JSONResponse
from starlette.datastructures import Headers

from app.constants.whatsapp import PAYLOAD_TOO_LARGE_TEXT

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

HTTP_413_CONTENT_TOO_LARGE = 413


class BodySizeLimitMiddleware:
    """Recusa corpos acima de `max_body_bytes` com 413.

    Content-Length declarado é verificado antes de ler o corpo. Em seguida
    o corpo é lido aqui mesmo, contando os bytes (cobre uploads chunked),
    e só então repassado ao app interno. A resposta 413 é sempre enviada
    por este middleware, nunca levantada dentro do `receive`.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_body_bytes:
            logger.warning(
                "request_body_too_large",
                extra={"content_length": int(content_length), "limit": self.max_body_bytes},
            )
            await self._reject(scope, receive, send)
            return

        buffered: list[Message] = []
        received = 0
        while True:
            message = await receive()
            buffered.append(message)
            if message["type"] != "http.request":
                break
            received += len(message.get("body", b""))
            if received > self.max_body_bytes:
                logger.warning(
                    "request_body_too_large",
                    extra={"received_bytes": received, "limit": self.max_body_bytes},
                )
                await self._reject(scope, receive, send)
                return
            if not message.get("more_body", False):
                break

        async def replay_receive() -> Message:
            if buffered:
                return buffered.pop(0)
            return await receive()

        await self.app(scope, replay_receive, send)

    async def _reject(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = JSONResponse(
            content={"error": PAYLOAD_TOO_LARGE_TEXT},
            status_code=HTTP_413_CONTENT_TOO_LARGE,
        )
        await response(scope, receive, send)
