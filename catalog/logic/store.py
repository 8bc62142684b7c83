"""The catalog store: one engine, one repository per table.

A `CatalogStore` is built once per application (see `catalog.main`) and
handed to route handlers through `get_store`; it is never reopened per
request.
"""

from __future__ import annotations

import logging

from fastapi import Request
from sqlalchemy import text as sql_text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from catalog.db.base import create_catalog_engine
from catalog.db.migrations_runner import apply_migrations
from catalog.logic.repository_base import TableRepository
from catalog.logic.repository_enterprises import EnterpriseRepository
from catalog.logic.repository_news import NewsRepository
from catalog.logic.repository_products import ProductRepository
from catalog.logic.repository_sliders import SliderRepository
from catalog.models.slider import SliderKind

logger = logging.getLogger(__name__)


class CatalogStore:
    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.enterprises = EnterpriseRepository(engine)
        self.products = ProductRepository(engine)
        self.news = NewsRepository(engine)
        self.sliders = SliderRepository(engine)

    @classmethod
    def open(cls, url: str, *, migrate: bool = True) -> "CatalogStore":
        """Open (or create) the database at `url`, applying the schema when asked."""
        store = cls(create_catalog_engine(url))
        if migrate:
            apply_migrations(store.engine)
        return store

    def repository_for(self, kind: SliderKind) -> TableRepository:
        """Return the repository holding items of the given slider kind."""
        repositories = {
            SliderKind.ENTERPRISE: self.enterprises,
            SliderKind.PRODUCT: self.products,
            SliderKind.NEWS: self.news,
        }
        return repositories[kind]

    def close(self) -> None:
        """Release pooled connections; the store must not be used afterwards."""
        self.engine.dispose()
        logger.info("catalog_store_closed")

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(sql_text("SELECT 1")).fetchone()
            return True
        except SQLAlchemyError:
            logger.error("Health DB check failed", exc_info=True)
            return False


def get_store(request: Request) -> CatalogStore:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store


__all__ = ["CatalogStore", "get_store"]
