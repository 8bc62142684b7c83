"""News CRUD endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from catalog.errors import NotFoundError
from catalog.logic.store import CatalogStore, get_store
from catalog.logic.validation import NEWS_REQUIRED, require_fields
from catalog.models import Created, Deleted, NewsItem, NewsPayload, Updated

router = APIRouter()


@router.get("/news", response_model=List[NewsItem], operation_id="listNews")
def list_news(store: CatalogStore = Depends(get_store)):
    return store.news.list()


@router.get("/news/{news_id}", response_model=NewsItem, operation_id="getNewsItem")
def get_news_item(news_id: int, store: CatalogStore = Depends(get_store)):
    row = store.news.get(news_id)
    if row is None:
        raise NotFoundError("News item not found")
    return row


@router.post("/news", status_code=201, response_model=Created, operation_id="createNewsItem")
def create_news_item(payload: NewsPayload, store: CatalogStore = Depends(get_store)):
    fields = payload.model_dump()
    require_fields(fields, NEWS_REQUIRED)
    return Created(id=store.news.create(fields))


@router.put("/news/{news_id}", response_model=Updated, operation_id="replaceNewsItem")
def replace_news_item(news_id: int, payload: NewsPayload, store: CatalogStore = Depends(get_store)):
    fields = payload.model_dump()
    require_fields(fields, NEWS_REQUIRED)
    return Updated(updated=store.news.replace(news_id, fields))


@router.delete("/news/{news_id}", response_model=Deleted, operation_id="deleteNewsItem")
def delete_news_item(news_id: int, store: CatalogStore = Depends(get_store)):
    return Deleted(deleted=store.news.delete(news_id))


__all__ = ["router"]
