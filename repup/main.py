"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from repup import __version__
from repup.api.errors import register_error_handlers
from repup.api.middleware import RequestLoggingMiddleware
from repup.api.v1 import api_router, debug_router
from repup.core.config import Settings, get_settings
from repup.core.logging_setup import configure_logging
from repup.db.session import Database

logger = logging.getLogger(__name__)


def build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup: build the storage handle and check connectivity; shutdown: release the pool."""
        database = Database.from_settings(settings)
        try:
            await database.ping()
        except Exception:
            await database.dispose()
            logger.exception("Database unreachable at startup")
            raise
        if settings.database_create_tables:
            # Local/dev convenience; use Alembic in production
            await database.create_all()
        app.state.database = database
        logger.info("Connected to %s database", database.url.get_backend_name())
        yield
        await database.dispose()
        logger.info("Database pool closed")

    return lifespan


def create_application(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=build_lifespan(settings),
        docs_url="/docs",
        redoc_url="/redoc",
    )
    register_error_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)
    # CORS: allow everything in debug, localhost in dev, CORS_ORIGINS env (comma-separated) otherwise
    if settings.debug:
        cors_origins = ["*"]
    elif settings.environment == "development":
        cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
    else:
        cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        return {"status": "ok", "message": settings.app_name}

    app.include_router(api_router, prefix=settings.api_v1_prefix)
    if settings.debug_endpoints:
        app.include_router(debug_router, prefix=settings.api_v1_prefix)
    return app


app = create_application()
