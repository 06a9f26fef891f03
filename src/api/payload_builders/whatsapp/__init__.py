"""Payload builders WhatsApp Web — um builder por tipo de mensagem."""

from api.payload_builders.whatsapp.factory import build_full_payload, get_payload_builder
from api.payload_builders.whatsapp.media import FilePayloadBuilder, ImagePayloadBuilder
from api.payload_builders.whatsapp.text import TextPayloadBuilder

__all__ = [
    "FilePayloadBuilder",
    "ImagePayloadBuilder",
    "TextPayloadBuilder",
    "build_full_payload",
    "get_payload_builder",
]
