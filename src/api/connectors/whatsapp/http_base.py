"""Cliente HTTP base para conectores da camada API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples para chamadas externas (sem retries).

    Args:
        config: Timeout e headers padrão.
        transport: Transport httpx opcional (ex: MockTransport em testes).
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self._transport,
            timeout=self._config.timeout_seconds,
            headers=self._config.default_headers,
        )

    async def get(self, url: str) -> httpx.Response:
        return await self._request("GET", url)

    async def post(
        self,
        url: str,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        return await self._request("POST", url, json=json)

    async def _request(
        self,
        method: str,
        url: str,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        try:
            async with self._client() as client:
                response = await client.request(method, url, json=json)
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout") from exc
        except httpx.HTTPError as exc:
            raise HttpError("http_connection_error") from exc

        if response.status_code >= 400:
            logger.warning(
                "http_error_status",
                extra={"method": method, "status_code": response.status_code},
            )
            raise HttpError("http_error_status", status_code=response.status_code)
        return response
