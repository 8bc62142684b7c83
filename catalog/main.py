from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from catalog.config import AppConfig, load_config
from catalog.http.errors import register_error_handlers
from catalog.http.request_id import RequestIdMiddleware
from catalog.logging_setup import configure_logging
from catalog.logic.store import CatalogStore
from catalog.middleware.cors import apply_cors
from catalog.routes import api_router, auth_router

logger = logging.getLogger(__name__)


def create_app(config: AppConfig | None = None, store: CatalogStore | None = None) -> FastAPI:
    """Build the FastAPI application.

    The store is opened here, once, and shared by every request through
    `app.state.store`. Pass an explicit `store` to reuse an existing one; the
    caller then owns it and closes it.
    """
    configure_logging()
    config = config or load_config()
    owns_store = store is None
    if store is None:
        store = CatalogStore.open(config.database.url, migrate=config.database.auto_apply_migrations)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        try:
            yield
        finally:
            if owns_store:
                store.close()

    app = FastAPI(title="Catalog Service", version="1.0.0", lifespan=lifespan)
    app.state.config = config
    app.state.store = store

    register_error_handlers(app)
    apply_cors(app, origins=config.cors.origins)
    app.add_middleware(RequestIdMiddleware)

    app.include_router(auth_router, tags=["Auth"])
    app.include_router(api_router)

    @app.get("/health")
    def health() -> dict:
        db_ok = store.ping()
        return {"status": "ok" if db_ok else "degraded", "db": db_ok}

    logger.info(
        "catalog_app_created auth_required=%s origins=%s", config.auth.required, ",".join(config.cors.origins)
    )
    return app


# Intentionally do not instantiate the app at import time to prevent side effects.
