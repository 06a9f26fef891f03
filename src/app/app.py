"""Entrypoint da aplicação WhatsAPI.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    python -m app.app

Documentação:
    Swagger UI em /api-docs, OpenAPI em /openapi.json
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.middleware import BodySizeLimitMiddleware, correlation_id_middleware
from api.routes import create_api_router
from api.routes.whatsapp.responses import (
    http_exception_handler,
    request_validation_exception_handler,
)
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.whatsapp_factory import (
    create_send_outbound_use_case,
    create_session_monitor,
    create_whatsapp_web_client,
)
from config.logging import get_logger
from config.settings import (
    DOCS_URL,
    OPENAPI_URL,
    get_base_settings,
    get_server_settings,
    get_whatsapp_web_settings,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer log de startup
initialize_app()

logger = get_logger(__name__)

API_TITLE = "WhatsAPI"
API_VERSION = "1.0.0"
API_DESCRIPTION = "API para enviar mensajes y archivos por WhatsApp"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Inicia o monitor de sessão WhatsApp Web (QR code no terminal)

    Shutdown:
    - Para o monitor
    """
    logger.info("app_starting", extra={"service": "whatsapi"})
    validate_runtime_settings()

    monitor = None
    session_client = app.state.session_client
    if session_client is not None and get_whatsapp_web_settings().session_monitor_enabled:
        app.state.session, monitor = create_session_monitor(session_client)
        monitor.start()

    server = get_server_settings()
    logger.info("api_listening", extra={"url": server.base_url})
    logger.info("swagger_ui_available", extra={"url": server.docs_url})

    yield

    logger.info("app_shutting_down", extra={"service": "whatsapi"})
    if monitor is not None:
        await monitor.stop()


def create_app(
    messaging_client: Any | None = None,
    session_client: Any | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        messaging_client: Adapter de envio (MessagingClientProtocol).
            Se None, cria o cliente do bridge whatsapp-web.js.
        session_client: Adapter de sessão (SessionClientProtocol) usado pelo
            monitor. Se None, usa o mesmo cliente padrão quando
            messaging_client também não foi informado.

    Returns:
        Aplicação FastAPI configurada.
    """
    if messaging_client is None:
        messaging_client = create_whatsapp_web_client()
        session_client = session_client or messaging_client

    fastapi_app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        debug=get_base_settings().debug,
        lifespan=lifespan,
        docs_url=DOCS_URL,
        redoc_url=None,
        openapi_url=OPENAPI_URL,
    )

    fastapi_app.state.messaging_client = messaging_client
    fastapi_app.state.session_client = session_client
    fastapi_app.state.session = None
    fastapi_app.state.send_use_case = create_send_outbound_use_case(messaging_client)

    fastapi_app.add_exception_handler(
        RequestValidationError,
        request_validation_exception_handler,
    )
    fastapi_app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    fastapi_app.middleware("http")(correlation_id_middleware)
    fastapi_app.add_middleware(
        BodySizeLimitMiddleware,
        max_body_bytes=get_server_settings().max_body_bytes,
    )

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "whatsapi"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    server = get_server_settings()
    logger.info("Starting WhatsAPI", extra={"port": server.port})
    uvicorn.run(
        "app.app:app",
        host=server.host,
        port=server.port,
    )


if __name__ == "__main__":
    main()
