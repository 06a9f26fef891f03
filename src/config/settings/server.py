"""Settings do servidor HTTP.

Porta, limite de corpo de requisição e caminhos da documentação.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_HTTP_PORT: int = 3000
DEFAULT_MAX_BODY_BYTES: int = 50 * 1024 * 1024  # 50MB, comporta arquivos em base64

DOCS_URL: str = "/api-docs"
OPENAPI_URL: str = "/openapi.json"


@dataclass(frozen=True)
class ServerSettings:
    """Configurações do servidor HTTP.

    Attributes:
        host: Interface de escuta
        port: Porta fixa de escuta
        max_body_bytes: Limite superior do corpo das requisições
        public_base_url: URL base anunciada nos logs de startup
    """

    host: str = "0.0.0.0"
    port: int = DEFAULT_HTTP_PORT
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES
    public_base_url: str = ""

    @property
    def base_url(self) -> str:
        """URL pública do serviço (default: localhost na porta configurada)."""
        return (self.public_base_url or f"http://localhost:{self.port}").rstrip("/")

    @property
    def docs_url(self) -> str:
        """URL completa do Swagger UI."""
        return f"{self.base_url}{DOCS_URL}"

    def validate(self) -> list[str]:
        """Valida configurações do servidor.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not 0 < self.port < 65536:
            errors.append("HTTP_PORT deve estar entre 1 e 65535")

        if self.max_body_bytes <= 0:
            errors.append("HTTP_MAX_BODY_BYTES deve ser > 0")

        return errors


def _load_from_env() -> ServerSettings:
    """Carrega ServerSettings a partir de variáveis de ambiente."""
    return ServerSettings(
        host=os.getenv("HTTP_HOST", "0.0.0.0"),
        port=int(os.getenv("HTTP_PORT", str(DEFAULT_HTTP_PORT))),
        max_body_bytes=int(os.getenv("HTTP_MAX_BODY_BYTES", str(DEFAULT_MAX_BODY_BYTES))),
        public_base_url=os.getenv("PUBLIC_BASE_URL", ""),
    )


@lru_cache(maxsize=1)
def get_server_settings() -> ServerSettings:
    """Retorna instância cacheada de ServerSettings."""
    return _load_from_env()
