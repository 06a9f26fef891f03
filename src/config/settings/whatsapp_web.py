"""Settings específicas do canal WhatsApp Web.

O envio é delegado a um bridge whatsapp-web.js (processo Node.js que
mantém a sessão pareada por QR code). Este serviço só conhece a URL do
bridge e os limites das chamadas.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Sufixo de endereço de contatos individuais no WhatsApp Web
ADDRESS_SUFFIX: str = "@c.us"

# Content-type fixo de /send-file, independente da extensão do filename
FILE_MIME_TYPE: str = "application/pdf"

DEFAULT_BRIDGE_URL: str = "http://localhost:8081"


@dataclass(frozen=True)
class WhatsAppWebSettings:
    """Configurações do adapter WhatsApp Web.

    Attributes:
        bridge_url: URL base do bridge whatsapp-web.js
        bridge_token: Bearer token opcional exigido pelo bridge
        request_timeout_seconds: Timeout das chamadas ao bridge
        media_timeout_seconds: Timeout do download de mídia por URL
        media_max_size_bytes: Tamanho máximo de mídia baixada por URL
        session_poll_seconds: Intervalo de polling do estado da sessão
        session_monitor_enabled: Liga o monitor de sessão no startup
    """

    bridge_url: str = DEFAULT_BRIDGE_URL
    bridge_token: str = ""

    request_timeout_seconds: float = 60.0
    media_timeout_seconds: float = 30.0
    media_max_size_bytes: int = 16 * 1024 * 1024  # 16MB

    session_poll_seconds: float = 2.0
    session_monitor_enabled: bool = True

    def get_endpoint(self, path: str) -> str:
        """Retorna URL completa de um endpoint do bridge.

        Args:
            path: Caminho relativo (ex: "/messages")
        """
        return f"{self.bridge_url.rstrip('/')}/{path.lstrip('/')}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do adapter.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.bridge_url.startswith(("http://", "https://")):
            errors.append("WHATSAPP_WEB_BRIDGE_URL deve começar com http:// ou https://")

        if self.request_timeout_seconds <= 0:
            errors.append("WHATSAPP_WEB_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.media_timeout_seconds <= 0:
            errors.append("WHATSAPP_WEB_MEDIA_TIMEOUT_SECONDS deve ser > 0")

        if self.media_max_size_bytes <= 0:
            errors.append("WHATSAPP_WEB_MEDIA_MAX_SIZE_BYTES deve ser > 0")

        if self.session_poll_seconds <= 0:
            errors.append("WHATSAPP_WEB_SESSION_POLL_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> WhatsAppWebSettings:
    """Carrega WhatsAppWebSettings a partir de variáveis de ambiente."""
    return WhatsAppWebSettings(
        bridge_url=os.getenv("WHATSAPP_WEB_BRIDGE_URL", DEFAULT_BRIDGE_URL),
        bridge_token=os.getenv("WHATSAPP_WEB_BRIDGE_TOKEN", ""),
        request_timeout_seconds=float(
            os.getenv("WHATSAPP_WEB_REQUEST_TIMEOUT_SECONDS", "60")
        ),
        media_timeout_seconds=float(
            os.getenv("WHATSAPP_WEB_MEDIA_TIMEOUT_SECONDS", "30")
        ),
        media_max_size_bytes=int(
            os.getenv("WHATSAPP_WEB_MEDIA_MAX_SIZE_BYTES", str(16 * 1024 * 1024))
        ),
        session_poll_seconds=float(
            os.getenv("WHATSAPP_WEB_SESSION_POLL_SECONDS", "2")
        ),
        session_monitor_enabled=os.getenv(
            "WHATSAPP_WEB_SESSION_MONITOR", "true"
        ).lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_whatsapp_web_settings() -> WhatsAppWebSettings:
    """Retorna instância cacheada de WhatsAppWebSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
