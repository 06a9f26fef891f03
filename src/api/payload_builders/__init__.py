"""Payload builders por canal — construção do conteúdo enviado ao adapter."""

__all__: list[str] = []
