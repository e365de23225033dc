"""FastAPI application for the Short Sided round tracker."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from settings import Settings, configure_logging, load_settings
from storage.base import KeyValueStore
from storage.connection import db
from storage.json_file import JsonFileKeyValueStore
from storage.memory import InMemoryKeyValueStore
from storage.postgres import PostgresKeyValueStore
from storage.round_store import RoundStore

logger = logging.getLogger(__name__)


async def open_key_value_store(settings: Settings) -> KeyValueStore:
    """Build the key-value backend the settings ask for."""
    if settings.storage_backend == "memory":
        return InMemoryKeyValueStore()
    if settings.storage_backend == "postgres":
        if not settings.database_url:
            raise RuntimeError("SHORTSIDED_STORAGE=postgres requires DATABASE_URL")
        await db.initialize(dsn=settings.database_url)
        kv = PostgresKeyValueStore(db.pool)
        await kv.ensure_schema()
        return kv
    return JsonFileKeyValueStore(settings.data_path)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the saved round on startup; let pending writes finish on shutdown."""
    settings: Settings = app.state.settings
    store: Optional[RoundStore] = app.state.round_store
    if store is None:
        kv = await open_key_value_store(settings)
        store = RoundStore(kv, key=settings.storage_key)
        app.state.round_store = store
    logger.info("Using %s storage", settings.storage_backend)
    await store.load()
    yield
    await store.flush()
    await db.close()


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[RoundStore] = None,
) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Short Sided",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.round_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173", "http://localhost:8081"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import rounds, stats
    app.include_router(rounds.router, prefix="/api/round", tags=["round"])
    app.include_router(stats.router, prefix="/api/stats", tags=["stats"])

    @app.get("/api/health")
    async def health():
        status = {"status": "ok", "storage": settings.storage_backend}
        if db.is_initialized:
            healthy = await db.health_check()
            status.update(status="ok" if healthy else "degraded", database=healthy)
        return status

    return app
