"""Product data access.

Optional product fields are normalised so that empty strings are stored as
NULL, on both create and full replace. `enterprise_id` is stored as given and
is not checked against the enterprises table.
"""

from __future__ import annotations

from typing import Any, Dict

from catalog.logic.repository_base import TableRepository
from catalog.models.product import PRODUCT_TEXT_FIELDS


class ProductRepository(TableRepository):
    table = "products"
    write_columns = ("name", "image_url", "slug", "enterprise_id") + PRODUCT_TEXT_FIELDS

    @staticmethod
    def _blank_to_null(values: Dict[str, Any]) -> Dict[str, Any]:
        for col in ("enterprise_id",) + PRODUCT_TEXT_FIELDS:
            if not values.get(col):
                values[col] = None
        return values

    def prepare_create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._blank_to_null(super().prepare_create(fields))

    def prepare_replace(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._blank_to_null(super().prepare_replace(fields))


__all__ = ["ProductRepository"]
