"""Modelos de dados compartilhados entre api e app.

Requisições de envio (validadas na borda HTTP), objeto de mídia do
adapter, payload de saída e resultado do envio.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from pydantic import BaseModel, Field

from app.constants.whatsapp import ErrorKind, MessageKind, SessionState


class OutboundRequest(BaseModel):
    """Base das requisições de envio.

    Campos obrigatórios são opcionais no schema: a ausência é tratada pelo
    validator (400 "Faltan parámetros"), não pelo pydantic.
    """

    kind: ClassVar[MessageKind]
    required_fields: ClassVar[tuple[str, ...]]

    number: str | None = Field(default=None, examples=["573001234567"])


class OutboundTextRequest(OutboundRequest):
    """Envio de mensagem de texto."""

    kind: ClassVar[MessageKind] = MessageKind.TEXT
    required_fields: ClassVar[tuple[str, ...]] = ("number", "message")

    message: str | None = Field(
        default=None,
        examples=["Hola, este es un mensaje de prueba"],
    )


class OutboundImageRequest(OutboundRequest):
    """Envio de imagem a partir de uma URL pública."""

    kind: ClassVar[MessageKind] = MessageKind.IMAGE
    required_fields: ClassVar[tuple[str, ...]] = ("number", "image_url")

    image_url: str | None = Field(
        default=None,
        alias="imageUrl",
        examples=["https://example.com/image.jpg"],
    )
    caption: str | None = Field(
        default=None,
        examples=["Esta es una imagen de prueba"],
    )


class OutboundFileRequest(OutboundRequest):
    """Envio de arquivo codificado em base64."""

    kind: ClassVar[MessageKind] = MessageKind.FILE
    required_fields: ClassVar[tuple[str, ...]] = ("number", "filename", "base64")

    filename: str | None = Field(default=None, examples=["documento.pdf"])
    base64: str | None = Field(default=None, examples=["JVBERi0xLjQKJe..."])


@dataclass(frozen=True, slots=True)
class MessageMedia:
    """Mídia no formato aceito pelo adapter (conteúdo em base64)."""

    mimetype: str
    data: str
    filename: str | None = None
    filesize: int | None = None


@dataclass(frozen=True, slots=True)
class OutboundPayload:
    """Conteúdo e opções prontos para o send do adapter."""

    content: str | MessageMedia
    options: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Resultado do envio, mapeado para HTTP uma única vez."""

    success: bool
    error_kind: ErrorKind | None = None
    message_id: str | None = None

    @classmethod
    def sent(cls, message_id: str | None = None) -> DispatchResult:
        return cls(success=True, message_id=message_id)

    @classmethod
    def failed(cls, error_kind: ErrorKind) -> DispatchResult:
        return cls(success=False, error_kind=error_kind)


@dataclass(frozen=True, slots=True)
class SessionStatus:
    """Estado da sessão reportado pelo adapter."""

    state: SessionState
    qr: str | None = None
