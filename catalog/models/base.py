"""Base class for catalog write payloads.

Clients send free-text fields as JSON numbers often enough (a weight of
`900`, a slug of `2024`) that every payload accepts them and keeps their
string form. Booleans are not numbers here.
"""

from __future__ import annotations

from typing import Any, ClassVar, Tuple

from pydantic import BaseModel, model_validator


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class CatalogPayload(BaseModel):
    # Fields whose numeric JSON values are stored as text
    text_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def numbers_as_text(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return {
            key: str(value) if key in cls.text_fields and _is_number(value) else value
            for key, value in data.items()
        }


__all__ = ["CatalogPayload"]
