"""FastAPI application package for the Catalog Service.

This package exposes a small FastAPI application factory serving the
enterprise, product, news and homepage slider catalog. It wires only
cross-cutting middleware (request-id and CORS) and mounts the API routers.
Data access lives in `catalog/logic/` and route handlers in `catalog/routes/`.
"""

from __future__ import annotations

from catalog.main import create_app

__all__ = ["create_app"]
