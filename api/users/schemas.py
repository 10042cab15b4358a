"""
User API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel


class SignupRequest(BaseModel):
    username: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class SignupResponse(BaseModel):
    message: str
    userId: int
    username: str


class UserResponse(BaseModel):
    id: int
    username: str
    email: str


class LoginResponse(BaseModel):
    message: str
    user: UserResponse
