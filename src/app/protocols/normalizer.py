"""Protocolos de normalização de destinatário."""

from __future__ import annotations

from typing import Protocol


class AddressNormalizerProtocol(Protocol):
    """Converte número de telefone no endereço esperado pelo adapter."""

    def normalize(self, number: str) -> str: ...
