"""Endpoints de envio WhatsApp Web.

Endpoints:
- POST /send-message: texto
- POST /send-image: imagem a partir de URL (caption opcional)
- POST /send-file: arquivo em base64 (sempre como application/pdf)

Cada endpoint só valida, delega ao use case e mapeia o resultado.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.routes.whatsapp.responses import build_dispatch_response, openapi_responses
from app.constants.whatsapp import MessageKind
from app.protocols.models import (
    OutboundFileRequest,
    OutboundImageRequest,
    OutboundTextRequest,
)
from app.use_cases.whatsapp import SendOutboundMessageUseCase

router = APIRouter()


def get_send_use_case(request: Request) -> SendOutboundMessageUseCase:
    """Use case montado no create_app com o adapter injetado."""
    return request.app.state.send_use_case


@router.post(
    "/send-message",
    summary="Enviar un mensaje de texto por WhatsApp",
    description="Envía un mensaje de texto a un número de WhatsApp.",
    responses=openapi_responses(MessageKind.TEXT),
    response_class=JSONResponse,
)
async def send_message(
    body: OutboundTextRequest,
    use_case: SendOutboundMessageUseCase = Depends(get_send_use_case),
) -> JSONResponse:
    result = await use_case.execute(body)
    return build_dispatch_response(result, body.kind)


@router.post(
    "/send-image",
    summary="Enviar una imagen por WhatsApp",
    description="Envía una imagen a un número de WhatsApp desde una URL.",
    responses=openapi_responses(MessageKind.IMAGE),
    response_class=JSONResponse,
)
async def send_image(
    body: OutboundImageRequest,
    use_case: SendOutboundMessageUseCase = Depends(get_send_use_case),
) -> JSONResponse:
    result = await use_case.execute(body)
    return build_dispatch_response(result, body.kind)


@router.post(
    "/send-file",
    summary="Enviar un archivo por WhatsApp",
    description="Envía un archivo a un número de WhatsApp en formato base64.",
    responses=openapi_responses(MessageKind.FILE),
    response_class=JSONResponse,
)
async def send_file(
    body: OutboundFileRequest,
    use_case: SendOutboundMessageUseCase = Depends(get_send_use_case),
) -> JSONResponse:
    result = await use_case.execute(body)
    return build_dispatch_response(result, body.kind)
