"""Functional test bootstrap.

Each test gets its own file-backed SQLite database under pytest's `tmp_path`,
with the schema applied through the real migrations runner, and a
`TestClient` bound to an application built around that store.
"""

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from catalog.config import AppConfig, AuthConfig, CorsConfig, DatabaseConfig
from catalog.logic.store import CatalogStore
from catalog.main import create_app

USERNAME = "admin"
PASSWORD = "Admin123"
TOKEN = "test-token-123"


def make_config(db_url: str, *, auth_required: bool = False) -> AppConfig:
    return AppConfig(
        database=DatabaseConfig(url=db_url, auto_apply_migrations=True),
        auth=AuthConfig(username=USERNAME, password=PASSWORD, token=TOKEN, required=auth_required),
        cors=CorsConfig(origins=["http://localhost:3001"]),
    )


@pytest.fixture()
def db_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'catalog.db'}"


@pytest.fixture()
def store(db_url) -> Iterator[CatalogStore]:
    s = CatalogStore.open(db_url)
    yield s
    s.close()


@pytest.fixture()
def client(db_url, store) -> Iterator[TestClient]:
    app = create_app(make_config(db_url), store=store)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def guarded_client(db_url, store) -> Iterator[TestClient]:
    app = create_app(make_config(db_url, auth_required=True), store=store)
    with TestClient(app) as c:
        yield c


def make_enterprise(client: TestClient, **overrides) -> int:
    body = {"name": "Acme", "image_url": "x.png", "slug": "acme"}
    body.update(overrides)
    resp = client.post("/enterprises", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


def make_product(client: TestClient, **overrides) -> int:
    body = {"name": "Kefir", "image_url": "kefir.png", "slug": "kefir"}
    body.update(overrides)
    resp = client.post("/products", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


def make_news(client: TestClient, **overrides) -> int:
    body = {"title": "Opening", "image_url": "n.png", "slug": "opening", "short_description": "We open"}
    body.update(overrides)
    resp = client.post("/news", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


def make_slider(client: TestClient, type_: str, ref_id: int, position: int = 0) -> int:
    resp = client.post("/sliders", json={"type": type_, "ref_id": ref_id, "position": position})
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]
