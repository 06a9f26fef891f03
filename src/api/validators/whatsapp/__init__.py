"""Validadores de requisições de envio WhatsApp Web.

Uso:
    from api.validators.whatsapp import validate_required_fields

    validate_required_fields(request)  # MissingParameterError se faltar campo
"""

from api.validators.whatsapp.required import (
    find_missing_fields,
    validate_required_fields,
)

__all__ = [
    "find_missing_fields",
    "validate_required_fields",
]
