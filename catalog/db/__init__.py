"""Database bootstrap utilities for the Catalog Service.

This module exposes convenience imports for engine construction, the
per-write transaction helper, and the migrations runner that applies the SQL
files shipped in `catalog/db/migrations/`. The DB layer does not leak ORM
models into route handlers; repositories issue SQL text directly.
"""

from catalog.db.base import create_catalog_engine, transaction
from catalog.db.migrations_runner import apply_migrations

__all__ = [
    "create_catalog_engine",
    "transaction",
    "apply_migrations",
]
