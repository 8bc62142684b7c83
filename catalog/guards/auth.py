"""Static bearer-token guard for catalog routes.

The service knows a single credential pair and a single token (see
`catalog.config.AuthConfig`). When `auth.required` is enabled, every catalog
route depends on `require_token`; otherwise the guard lets requests through.
"""

from __future__ import annotations

import logging
import secrets

from fastapi import Header, Request

from catalog.config import AppConfig, AuthConfig
from catalog.errors import AuthError, InvalidCredentials

logger = logging.getLogger(__name__)


def _extract_bearer_token(authorization: str | None) -> str | None:
    raw = (authorization or "").strip()
    parts = raw.split(" ", 1)
    if len(parts) != 2:
        return None
    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        return None
    return token


def check_credentials(auth: AuthConfig, username: str | None, password: str | None) -> str:
    """Return the static token when the pair matches the configured credentials."""
    user_ok = secrets.compare_digest((username or "").encode("utf-8"), auth.username.encode("utf-8"))
    pass_ok = secrets.compare_digest((password or "").encode("utf-8"), auth.password.encode("utf-8"))
    if not (user_ok and pass_ok):
        logger.info("login_rejected username=%r", username)
        raise InvalidCredentials()
    return auth.token


async def require_token(request: Request, authorization: str | None = Header(default=None)) -> None:
    config: AppConfig = request.app.state.config
    if not config.auth.required:
        return None
    token = _extract_bearer_token(authorization)
    if token is None or not secrets.compare_digest(token.encode("utf-8"), config.auth.token.encode("utf-8")):
        logger.info("auth_rejected path=%s", request.url.path)
        raise AuthError("Unauthorized")
    return None


__all__ = ["check_credentials", "require_token"]
