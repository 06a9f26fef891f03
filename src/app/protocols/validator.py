"""Protocolos de validação de requisições outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import OutboundRequest


class OutboundRequestValidatorProtocol(Protocol):
    """Contrato mínimo para validação de requisições outbound.

    Levanta MissingParameterError quando um campo obrigatório falta.
    """

    def validate_outbound_request(self, request: OutboundRequest) -> None: ...
