"""Normalizers por canal — conversão de dados externos para o formato do adapter."""

from .whatsapp import normalize_address

__all__ = ["normalize_address"]
