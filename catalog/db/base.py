"""SQLAlchemy engine and transaction helpers.

The service targets a single file-backed SQLite database. No declarative
models are defined here; this module only manages connection lifecycle.
The engine itself is owned by `catalog.logic.store.CatalogStore`, which
creates it once and disposes it on shutdown.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


def create_catalog_engine(url: str) -> Engine:
    """Build a SQLAlchemy Engine for the given URL.

    For SQLite in-memory URLs, use a StaticPool to keep a single connection
    alive across sessions and threads during tests.
    """
    kwargs: dict = {"future": True, "pool_pre_ping": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url:
            kwargs["poolclass"] = StaticPool
    engine = create_engine(url, **kwargs)
    logger.info("db_engine_created url=%s", engine.url.render_as_string(hide_password=True))
    return engine


@contextmanager
def transaction(engine: Engine) -> Generator[Connection, None, None]:
    """Yield a connection inside a transaction committed on success.

    Any exception rolls the transaction back and is re-raised, so a single
    logical write either fully applies or not at all.
    """
    with engine.connect() as conn:
        trans = conn.begin()
        try:
            yield conn
            trans.commit()
        except Exception:
            trans.rollback()
            # The caller reports the failure; only record the rollback here
            logger.warning("DB transaction rolled back")
            raise
