"""Configuration utilities for the Catalog Service.

This module loads application configuration with the following rules:
- Primary source: `catalog_config.json` at the working directory root.
- Overrides: environment variables, then optional text files under `config/`.
- Validation: Pydantic models enforce required fields and value constraints.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator


CONFIG_DIR = Path("config")
ROOT_CATALOG_CONFIG = Path("catalog_config.json")
DEFAULT_DATABASE_URL = "sqlite:///./database.db"
logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _read_config_file(rel_path: str) -> Optional[str]:
    path = CONFIG_DIR / rel_path
    try:
        if path.exists():
            return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        # Recoverable: log and ignore unreadable override
        logger.warning("Failed to read override %s: %s", path, e)
        return None
    return None


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value


def _as_bool(text: Optional[str]) -> bool:
    return str(text or "").strip().lower() in _TRUE_VALUES


class DatabaseConfig(BaseModel):
    url: str
    auto_apply_migrations: bool = Field(default=True)

    @field_validator("url")
    @classmethod
    def url_must_be_non_empty(cls, v: str) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("database.url must be a non-empty string")
        return v.strip()


class AuthConfig(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    token: str = Field(min_length=1)
    required: bool = Field(default=False)


class CorsConfig(BaseModel):
    origins: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator("origins")
    @classmethod
    def origins_must_not_be_blank(cls, v: List[str]) -> List[str]:
        cleaned = [o.strip() for o in v if o and o.strip()]
        return cleaned or ["*"]


class AppConfig(BaseModel):
    database: DatabaseConfig
    auth: AuthConfig
    cors: CorsConfig = Field(default_factory=CorsConfig)


def _read_json_file(path: Path) -> dict:
    try:
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            return data if isinstance(data, dict) else {}
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("Failed to read JSON config %s: %s", path, e)
    return {}


def load_config() -> AppConfig:
    """Load configuration with validation.

    Precedence (highest first):
    1) Environment variables
    2) Text files in `config/` (optional)
    3) catalog_config.json at project root (primary base)
    4) Safe defaults for development
    """

    base = _read_json_file(ROOT_CATALOG_CONFIG)

    def _base(path: str, default: Optional[str] = None) -> Optional[str]:
        cur: object = base
        for key in path.split("."):
            if not isinstance(cur, dict) or key not in cur:
                return default
            cur = cur[key]
        if isinstance(cur, list):
            return ",".join(str(item) for item in cur)
        return str(cur) if cur not in (None, "") else default

    # Database
    url = _env("DATABASE_URL") or _read_config_file("database.url") or _base("database.url") or DEFAULT_DATABASE_URL
    auto_migrate_text = (
        _env("AUTO_APPLY_MIGRATIONS")
        or _read_config_file("database.auto_apply_migrations")
        or _base("database.auto_apply_migrations", "true")
    )

    # Auth
    username = _env("CATALOG_USERNAME") or _read_config_file("auth.username") or _base("auth.username", "admin")
    password = _env("CATALOG_PASSWORD") or _read_config_file("auth.password") or _base("auth.password", "Admin123")
    token = _env("CATALOG_TOKEN") or _read_config_file("auth.token") or _base("auth.token", "dummy-token-123")
    required_text = _env("CATALOG_REQUIRE_AUTH") or _read_config_file("auth.required") or _base("auth.required", "false")

    # CORS
    origins_text = _env("CORS_ORIGINS") or _read_config_file("cors.origins") or _base("cors.origins", "*")

    try:
        cfg = AppConfig(
            database=DatabaseConfig(url=url, auto_apply_migrations=_as_bool(auto_migrate_text)),
            auth=AuthConfig(
                username=username,
                password=password,
                token=token,
                required=_as_bool(required_text),
            ),
            cors=CorsConfig(origins=str(origins_text).split(",")),
        )
        return cfg
    except PydanticValidationError as e:
        logger.error("Invalid application configuration: %s", e)
        raise


__all__ = [
    "AppConfig",
    "AuthConfig",
    "CorsConfig",
    "DatabaseConfig",
    "load_config",
]
