from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dog_bff.config.settings import Settings, get_settings
from dog_bff.domain.ports.store import Store
from dog_bff.infrastructure.repos.store_sqlalchemy import SQLAlchemyStore
from dog_bff.interfaces.http.routers import breeds, pets
from dog_bff.interfaces.middleware.error_handler import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = app.state.store
    try:
        # A failed ping aborts startup
        await store.ping()
        yield
    finally:
        await store.close()
        logger.info("Store closed")


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    # Align common libraries
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine"):
        logging.getLogger(name).setLevel(level)


def create_app(*, settings: Settings | None = None, store: Store | None = None) -> FastAPI:
    """Build the API.

    When ``store`` is omitted, a SQLAlchemyStore is built from the configured
    connection string.
    """
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="Dog App BFF",
        version="0.1.0",
        description="Breeds and pets API for the dog app frontend",
        lifespan=lifespan,
    )
    app.state.settings = settings
    if store is None:
        store = SQLAlchemyStore.from_url(settings.db_conn_string)
    app.state.store = store
    register_error_handlers(app)

    # Group all API routes behind a single versioned prefix
    api = APIRouter(prefix="/api/v1")
    api.include_router(breeds.router)
    api.include_router(pets.router)

    @api.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app
