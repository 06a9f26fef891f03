"""Enums e textos fixos do canal WhatsApp Web."""

from __future__ import annotations

from enum import StrEnum


class MessageKind(StrEnum):
    """Tipos de envio expostos pela API HTTP."""

    TEXT = "text"
    IMAGE = "image"
    FILE = "file"


class SessionState(StrEnum):
    """Estados do ciclo de vida da sessão WhatsApp Web."""

    UNINITIALIZED = "UNINITIALIZED"
    AWAITING_PAIRING = "AWAITING_PAIRING"
    READY = "READY"


class ErrorKind(StrEnum):
    """Tipos de erro retornados pela camada que chama o adapter."""

    MISSING_PARAMETER = "MISSING_PARAMETER"
    DELIVERY_FAILURE = "DELIVERY_FAILURE"


# Textos das respostas HTTP (contrato público, mantidos em espanhol)
MISSING_PARAMETERS_TEXT = "Faltan parámetros"
PAYLOAD_TOO_LARGE_TEXT = "Payload demasiado grande"

SUCCESS_TEXTS: dict[MessageKind, str] = {
    MessageKind.TEXT: "Mensaje enviado correctamente",
    MessageKind.IMAGE: "Imagen enviada correctamente",
    MessageKind.FILE: "Archivo enviado correctamente",
}

FAILURE_TEXTS: dict[MessageKind, str] = {
    MessageKind.TEXT: "No se pudo enviar el mensaje",
    MessageKind.IMAGE: "No se pudo enviar la imagen",
    MessageKind.FILE: "No se pudo enviar el archivo",
}
