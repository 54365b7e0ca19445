from fastapi import FastAPI
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from app.core.config import Settings


def init_limiter(app: FastAPI, settings: Settings) -> Limiter:
    """
    Límite global de ventana fija por IP (en memoria, un contador por proceso).
    Es infraestructura de protección, no forma parte de la lógica del API.
    """
    limiter = Limiter(
        key_func=get_remote_address,
        application_limits=[settings.rate_limit],
        strategy="fixed-window",
        storage_uri="memory://",
        enabled=settings.RATE_LIMIT_ENABLED,
        headers_enabled=False,
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    return limiter
