"""Normalização de número de telefone para endereço WhatsApp Web."""

from __future__ import annotations

from config.settings import ADDRESS_SUFFIX


def normalize_address(number: str) -> str:
    """Converte número em endereço de contato (`<numero>@c.us`).

    Números que já contêm o sufixo são devolvidos sem alteração, o que
    torna a função idempotente. Não há validação de formato: qualquer
    string não vazia é aceita.

    Args:
        number: Número informado pelo cliente (ex: "573001234567")

    Returns:
        Endereço no formato do adapter (ex: "573001234567@c.us")
    """
    if ADDRESS_SUFFIX in number:
        return number
    return f"{number}{ADDRESS_SUFFIX}"
