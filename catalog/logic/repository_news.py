"""News data access. `created_at` is assigned by the database and never rewritten."""

from __future__ import annotations

from catalog.logic.repository_base import TableRepository


class NewsRepository(TableRepository):
    table = "news"
    write_columns = ("title", "image_url", "short_description", "full_text", "slug")
    extra_read_columns = ("created_at",)


__all__ = ["NewsRepository"]
