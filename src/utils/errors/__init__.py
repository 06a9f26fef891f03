"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    DeliveryFailureError,
    MissingParameterError,
    WhatsApiError,
)

__all__ = [
    "DeliveryFailureError",
    "MissingParameterError",
    "WhatsApiError",
]
