"""Tests for configuration loading and precedence."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from catalog.config import DEFAULT_DATABASE_URL, DatabaseConfig, load_config

_ENV_KEYS = (
    "DATABASE_URL",
    "AUTO_APPLY_MIGRATIONS",
    "CATALOG_USERNAME",
    "CATALOG_PASSWORD",
    "CATALOG_TOKEN",
    "CATALOG_REQUIRE_AUTH",
    "CORS_ORIGINS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    cfg = load_config()
    assert cfg.database.url == DEFAULT_DATABASE_URL
    assert cfg.database.auto_apply_migrations is True
    assert cfg.auth.username == "admin"
    assert cfg.auth.password == "Admin123"
    assert cfg.auth.token == "dummy-token-123"
    assert cfg.auth.required is False
    assert cfg.cors.origins == ["*"]


def test_json_file_is_base(tmp_path):
    (tmp_path / "catalog_config.json").write_text(
        json.dumps(
            {
                "database": {"url": "sqlite:///from-json.db"},
                "auth": {"required": True, "token": "json-token"},
                "cors": {"origins": ["https://a.example", "https://b.example"]},
            }
        ),
        encoding="utf-8",
    )
    cfg = load_config()
    assert cfg.database.url == "sqlite:///from-json.db"
    assert cfg.auth.required is True
    assert cfg.auth.token == "json-token"
    assert cfg.cors.origins == ["https://a.example", "https://b.example"]


def test_config_dir_overrides_json(tmp_path):
    (tmp_path / "catalog_config.json").write_text(json.dumps({"database": {"url": "sqlite:///json.db"}}))
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "database.url").write_text("sqlite:///file.db\n", encoding="utf-8")
    assert load_config().database.url == "sqlite:///file.db"


def test_env_overrides_everything(tmp_path, monkeypatch):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "database.url").write_text("sqlite:///file.db", encoding="utf-8")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///env.db")
    monkeypatch.setenv("CATALOG_REQUIRE_AUTH", "yes")
    monkeypatch.setenv("AUTO_APPLY_MIGRATIONS", "0")
    monkeypatch.setenv("CORS_ORIGINS", "http://x.test, http://y.test")
    cfg = load_config()
    assert cfg.database.url == "sqlite:///env.db"
    assert cfg.auth.required is True
    assert cfg.database.auto_apply_migrations is False
    assert cfg.cors.origins == ["http://x.test", "http://y.test"]


def test_blank_values_fall_back_to_defaults(tmp_path):
    (tmp_path / "catalog_config.json").write_text(json.dumps({"auth": {"token": ""}}))
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "auth.username").write_text("   ", encoding="utf-8")
    cfg = load_config()
    assert cfg.auth.token == "dummy-token-123"
    assert cfg.auth.username == "admin"


def test_blank_database_url_is_rejected():
    with pytest.raises(ValidationError):
        DatabaseConfig(url="   ")
