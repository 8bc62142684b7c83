"""APIRouter registration for the Catalog Service."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from catalog.guards.auth import require_token
from catalog.routes.auth import router as auth_router
from catalog.routes.enterprises import router as enterprises_router
from catalog.routes.news import router as news_router
from catalog.routes.products import router as products_router
from catalog.routes.sliders import router as sliders_router

# Catalog routes sit behind the token guard; it is a no-op unless auth.required is set
api_router = APIRouter(dependencies=[Depends(require_token)])
api_router.include_router(enterprises_router, tags=["Enterprises"])
api_router.include_router(products_router, tags=["Products"])
api_router.include_router(news_router, tags=["News"])
api_router.include_router(sliders_router, tags=["Sliders"])

__all__ = ["api_router", "auth_router"]
