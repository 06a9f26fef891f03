"""Adapters concretos para WhatsApp Web (wiring em app/bootstrap).

Este módulo é o único autorizado a acoplar app <-> api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.normalizers.whatsapp import normalize_address
from api.payload_builders.whatsapp import build_full_payload
from api.validators.whatsapp import validate_required_fields
from app.protocols.normalizer import AddressNormalizerProtocol
from app.protocols.payload_builder import PayloadBuilderProtocol
from app.protocols.validator import OutboundRequestValidatorProtocol

if TYPE_CHECKING:
    from app.protocols.messaging_client import MessagingClientProtocol
    from app.protocols.models import OutboundPayload, OutboundRequest


class WhatsAppWebAddressNormalizer(AddressNormalizerProtocol):
    """Normalizador de número para endereço `@c.us`."""

    def normalize(self, number: str) -> str:
        return normalize_address(number)


class WhatsAppWebPayloadBuilder(PayloadBuilderProtocol):
    """Builder de payload por tipo de mensagem."""

    async def build_full_payload(
        self,
        request: OutboundRequest,
        client: MessagingClientProtocol,
    ) -> OutboundPayload:
        return await build_full_payload(request, client)


class WhatsAppWebOutboundValidator(OutboundRequestValidatorProtocol):
    """Validador de presença dos campos obrigatórios."""

    def validate_outbound_request(self, request: OutboundRequest) -> None:
        validate_required_fields(request)
