"""Functional tests for the enterprise endpoints."""

from __future__ import annotations

from tests.functional.conftest import make_enterprise, make_product


def test_create_then_get_round_trip(client):
    resp = client.post("/enterprises", json={"name": "Acme", "image_url": "x.png", "slug": "acme"})
    assert resp.status_code == 201
    assert resp.json() == {"id": 1}

    got = client.get("/enterprises/1")
    assert got.status_code == 200
    assert got.json() == {"id": 1, "name": "Acme", "image_url": "x.png", "description": "", "slug": "acme"}


def test_create_keeps_given_description(client):
    eid = make_enterprise(client, description="Dairy since 1950")
    assert client.get(f"/enterprises/{eid}").json()["description"] == "Dairy since 1950"


def test_numeric_text_fields_are_stored_as_text(client):
    eid = make_enterprise(client, description=5, slug=2024)
    got = client.get(f"/enterprises/{eid}").json()
    assert got["description"] == "5"
    assert got["slug"] == "2024"


def test_boolean_text_field_is_400(client):
    resp = client.post("/enterprises", json={"name": "Acme", "image_url": "x.png", "slug": True})
    assert resp.status_code == 400


def test_list_returns_all(client):
    make_enterprise(client, name="A", slug="a")
    make_enterprise(client, name="B", slug="b")
    body = client.get("/enterprises").json()
    assert sorted(e["name"] for e in body) == ["A", "B"]


def test_slug_is_not_unique(client):
    first = make_enterprise(client)
    second = make_enterprise(client)
    assert first != second


def test_create_missing_required_fields_is_400(client):
    resp = client.post("/enterprises", json={"name": "Acme"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing required fields: image_url, slug"


def test_create_blank_name_is_400(client):
    resp = client.post("/enterprises", json={"name": "  ", "image_url": "x.png", "slug": "acme"})
    assert resp.status_code == 400
    assert "name" in resp.json()["error"]


def test_get_missing_is_404(client):
    resp = client.get("/enterprises/42")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Enterprise not found"}


def test_non_integer_id_is_400(client):
    resp = client.get("/enterprises/abc")
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_replace_overwrites_all_fields(client):
    eid = make_enterprise(client, description="old")
    resp = client.put(
        f"/enterprises/{eid}", json={"name": "Acme 2", "image_url": "y.png", "slug": "acme-2"}
    )
    assert resp.status_code == 200
    assert resp.json() == {"updated": 1}
    got = client.get(f"/enterprises/{eid}").json()
    assert got == {"id": eid, "name": "Acme 2", "image_url": "y.png", "description": None, "slug": "acme-2"}


def test_replace_unknown_id_reports_zero(client):
    resp = client.put("/enterprises/9", json={"name": "A", "image_url": "a.png", "slug": "a"})
    assert resp.status_code == 200
    assert resp.json() == {"updated": 0}


def test_replace_requires_fields(client):
    eid = make_enterprise(client)
    resp = client.put(f"/enterprises/{eid}", json={"name": "A"})
    assert resp.status_code == 400


def test_delete_then_get_is_404(client):
    eid = make_enterprise(client)
    resp = client.delete(f"/enterprises/{eid}")
    assert resp.json() == {"deleted": 1}
    assert client.get(f"/enterprises/{eid}").status_code == 404
    assert client.delete(f"/enterprises/{eid}").json() == {"deleted": 0}


def test_delete_does_not_cascade_to_products(client):
    eid = make_enterprise(client)
    pid = make_product(client, enterprise_id=eid)
    client.delete(f"/enterprises/{eid}")
    product = client.get(f"/products/{pid}").json()
    assert product["enterprise_id"] == eid
