"""Normalizer WhatsApp Web — endereço do destinatário."""

from .address import normalize_address

__all__ = ["normalize_address"]
