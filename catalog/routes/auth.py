"""Login endpoint issuing the static bearer token."""

from __future__ import annotations

from fastapi import APIRouter, Request

from catalog.guards.auth import check_credentials
from catalog.models import LoginRequest, LoginResult

router = APIRouter()


@router.post("/login", response_model=LoginResult, operation_id="login")
def login(payload: LoginRequest, request: Request):
    token = check_credentials(request.app.state.config.auth, payload.username, payload.password)
    return LoginResult(success=True, token=token)


__all__ = ["router"]
