"""Exceções de domínio do gateway de envio."""

from __future__ import annotations


class WhatsApiError(Exception):
    """Base para erros do WhatsAPI."""


class MissingParameterError(WhatsApiError):
    """Campo obrigatório ausente ou vazio na requisição.

    Attributes:
        missing: Nomes dos campos ausentes, na ordem declarada.
    """

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"missing required fields: {', '.join(missing)}")
        self.missing = missing


class DeliveryFailureError(WhatsApiError):
    """Falha do adapter ao construir mídia ou enviar mensagem.

    Attributes:
        reason: Código curto e sem PII (ex: "bridge_http_503").
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
