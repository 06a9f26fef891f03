"""Agregador de settings do WhatsAPI.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# HTTP server settings
from config.settings.server import (
    DOCS_URL,
    OPENAPI_URL,
    ServerSettings,
    get_server_settings,
)

# Channel-specific settings
from config.settings.whatsapp_web import (
    ADDRESS_SUFFIX,
    FILE_MIME_TYPE,
    WhatsAppWebSettings,
    get_whatsapp_web_settings,
)

__all__ = [
    # Constants
    "ADDRESS_SUFFIX",
    "DOCS_URL",
    "FILE_MIME_TYPE",
    "OPENAPI_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Server
    "ServerSettings",
    # Channels
    "WhatsAppWebSettings",
    "get_base_settings",
    "get_server_settings",
    "get_whatsapp_web_settings",
]
