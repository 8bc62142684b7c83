"""Error taxonomy for the Catalog Service.

Single source of truth for mapping domain failures to HTTP statuses. Routes
and repositories raise these; `catalog.http.errors` renders them as
`{"error": message}` bodies (see `CatalogError.body`).
"""

from __future__ import annotations

from typing import Any, Dict, Iterable


class CatalogError(Exception):
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def body(self) -> Dict[str, Any]:
        return {"error": self.message}


class MissingFieldsError(CatalogError):
    status_code = 400

    def __init__(self, fields: Iterable[str], message: str | None = None) -> None:
        self.fields = list(fields)
        super().__init__(message or f"Missing required fields: {', '.join(self.fields)}")


class InvalidSliderType(CatalogError):
    status_code = 400

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__("Invalid slider type")


class NotFoundError(CatalogError):
    status_code = 404


class SliderNotFound(NotFoundError):
    def __init__(self, slider_id: int) -> None:
        self.slider_id = slider_id
        super().__init__("Slider not found")


class ReferencedItemNotFound(NotFoundError):
    def __init__(self, kind: str, ref_id: int) -> None:
        self.kind = kind
        self.ref_id = ref_id
        super().__init__("Referenced item not found")


class AuthError(CatalogError):
    status_code = 403


class InvalidCredentials(CatalogError):
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Invalid credentials")

    def body(self) -> Dict[str, Any]:
        # Same `success` key as LoginResult
        return {"error": self.message, "success": False}


class StoreFailure(CatalogError):
    """Wraps an underlying database fault; the driver message is surfaced."""

    status_code = 500


__all__ = [
    "CatalogError",
    "MissingFieldsError",
    "InvalidSliderType",
    "NotFoundError",
    "SliderNotFound",
    "ReferencedItemNotFound",
    "AuthError",
    "InvalidCredentials",
    "StoreFailure",
]
