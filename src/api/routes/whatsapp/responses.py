"""Mapeamento de resultados de envio para respostas HTTP.

Formato fixo para os três endpoints de envio:
- 200 {"success": true, "message": ...}
- 400 {"error": "Faltan parámetros"}
- 500 {"error": ...} (texto genérico por tipo de mensagem)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.constants.whatsapp import (
    FAILURE_TEXTS,
    MISSING_PARAMETERS_TEXT,
    SUCCESS_TEXTS,
    ErrorKind,
    MessageKind,
)

if TYPE_CHECKING:
    from fastapi import Request
    from fastapi.exceptions import RequestValidationError
    from starlette.exceptions import HTTPException

    from app.protocols.models import DispatchResult


class SuccessEnvelope(BaseModel):
    """Resposta de envio aceito pelo adapter."""

    success: bool = True
    message: str


class ErrorEnvelope(BaseModel):
    """Resposta de erro."""

    error: str


def missing_parameters_response() -> JSONResponse:
    return JSONResponse(
        content={"error": MISSING_PARAMETERS_TEXT},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def build_dispatch_response(result: DispatchResult, kind: MessageKind) -> JSONResponse:
    """Converte DispatchResult em resposta HTTP (único ponto de mapeamento)."""
    if result.success:
        return JSONResponse(
            content={"success": True, "message": SUCCESS_TEXTS[kind]},
            status_code=status.HTTP_200_OK,
        )
    if result.error_kind is ErrorKind.MISSING_PARAMETER:
        return missing_parameters_response()
    return JSONResponse(
        content={"error": FAILURE_TEXTS[kind]},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def openapi_responses(kind: MessageKind) -> dict[int | str, dict[str, Any]]:
    """Documentação OpenAPI das respostas de um endpoint de envio."""
    return {
        200: {"model": SuccessEnvelope, "description": SUCCESS_TEXTS[kind]},
        400: {"model": ErrorEnvelope, "description": MISSING_PARAMETERS_TEXT},
        500: {"model": ErrorEnvelope, "description": "Error en el servidor"},
    }


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Corpo ilegível ou campos de tipo errado contam como parâmetros faltantes."""
    return missing_parameters_response()


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Mantém o envelope {"error": ...} para erros HTTP do framework."""
    return JSONResponse(
        content={"error": str(exc.detail)},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )
