"""Pydantic request and response models for the catalog entities."""

from __future__ import annotations

from catalog.models.enterprise import Enterprise, EnterprisePayload
from catalog.models.news import NewsItem, NewsPayload
from catalog.models.product import Product, ProductPayload
from catalog.models.results import Created, Deleted, LoginRequest, LoginResult, Updated
from catalog.models.slider import DisplayItem, SliderEntry, SliderKind, SliderPayload

__all__ = [
    "Enterprise",
    "EnterprisePayload",
    "NewsItem",
    "NewsPayload",
    "Product",
    "ProductPayload",
    "SliderEntry",
    "SliderKind",
    "SliderPayload",
    "DisplayItem",
    "Created",
    "Updated",
    "Deleted",
    "LoginRequest",
    "LoginResult",
]
