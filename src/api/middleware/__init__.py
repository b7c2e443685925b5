"""Middlewares HTTP da borda."""

from api.middleware.correlation import correlation_id_middleware
from api.middleware.cors import CORS_HEADERS, cors_middleware

__all__ = [
    "CORS_HEADERS",
    "correlation_id_middleware",
    "cors_middleware",
]
