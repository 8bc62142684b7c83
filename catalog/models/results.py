"""Small response envelopes shared by the write routes and login."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class Created(BaseModel):
    id: int


class Updated(BaseModel):
    updated: int


class Deleted(BaseModel):
    deleted: int


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResult(BaseModel):
    success: bool
    token: str


__all__ = ["Created", "Updated", "Deleted", "LoginRequest", "LoginResult"]
