from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from store_admin.api import api_router
from store_admin.core.config import settings
from store_admin.core.exceptions import register_exception_handlers
from store_admin.core.logging import configure_logging
from store_admin.db.base import Database

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Tests install their own database before the app starts
    if getattr(app.state, "db", None) is None:
        app.state.db = Database(settings.DATABASE_URL, echo=settings.DB_ECHO)
    try:
        yield
    finally:
        await app.state.db.dispose()


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=f"{settings.PROJECT_NAME} API",
        description="Multi-tenant store administration: catalog, orders and payments",
        version=VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(api_router)

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "version": VERSION}

    return app


app = create_app()
