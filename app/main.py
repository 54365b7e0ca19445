# app/main.py
import logging
import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.core.json import UTF8JSONResponse
from app.core.config import Settings
from app.core.errors import install_error_handlers
from app.core.limiter import init_limiter
from app.core.security import TokenService
from app.db.session import build_engine, build_sessionmaker
from app.db.init_db import init_models, seed_data

# routers
from app.users.router import router as auth_router
from app.brands.router import router as brands_router

log = logging.getLogger("uvicorn")

API_VERSION = "1.0.0"


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Arma la app a partir de UNA config explícita: engine, sesiones, tokens
    y limiter quedan en app.state (nada global).
    """
    settings = settings or Settings()
    log.setLevel(settings.LOG_LEVEL.upper())

    app = FastAPI(
        title="Brands API",
        version=API_VERSION,
        default_response_class=UTF8JSONResponse,
    )

    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.sessionmaker = build_sessionmaker(engine)
    app.state.tokens = TokenService(settings.SECRET_KEY, settings.ACCESS_TOKEN_EXPIRE_MIN)

    install_error_handlers(app)
    init_limiter(app, settings)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_and_secure(request: Request, call_next):
        """
        Log de cada request + cabeceras de seguridad básicas.
        """
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        log.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response

    @app.on_event("startup")
    async def on_startup():
        log.info("🚀 Iniciando servicio…")
        if settings.uses_dev_secret:
            log.warning("⚠️ SECRET_KEY no definido: usando la clave de desarrollo (NO usar en producción)")
        await init_models(engine)
        if settings.SEED_DATA:
            await seed_data(app.state.sessionmaker)
        log.info("✅ Startup listo.")

    @app.on_event("shutdown")
    async def on_shutdown():
        await engine.dispose()

    @app.get("/")
    async def root():
        return {"message": "Brands API", "version": API_VERSION, "documentation": "/docs"}

    @app.get("/api/health/")
    async def health():
        return {"ok": True, "service": "fastapi", "msg": "healthy ✨"}

    # routers
    app.include_router(auth_router)     # /api/auth/...
    app.include_router(brands_router)   # /api/brands/...

    return app


app = create_app()
