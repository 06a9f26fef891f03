"""Validação de presença dos campos obrigatórios."""

from __future__ import annotations

from typing import TYPE_CHECKING

from utils.errors import MissingParameterError

if TYPE_CHECKING:
    from app.protocols.models import OutboundRequest


def find_missing_fields(request: OutboundRequest) -> list[str]:
    """Lista campos obrigatórios ausentes (None) ou vazios ("").

    Strings só com espaços são aceitas, assim como qualquer outro valor
    não vazio.
    """
    return [
        name
        for name in request.required_fields
        if getattr(request, name, None) in (None, "")
    ]


def validate_required_fields(request: OutboundRequest) -> None:
    """Valida a requisição de envio.

    Raises:
        MissingParameterError: Se algum campo obrigatório falta
    """
    missing = find_missing_fields(request)
    if missing:
        raise MissingParameterError(missing)
