"""Middlewares HTTP do serviço."""

from api.middleware.body_limit import BodySizeLimitMiddleware
from api.middleware.correlation import CORRELATION_HEADER, correlation_id_middleware

__all__ = [
    "CORRELATION_HEADER",
    "BodySizeLimitMiddleware",
    "correlation_id_middleware",
]
