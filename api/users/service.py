"""
Signup and login logic.

Passwords are stored as bcrypt hashes in `users.password`; login checks the
submitted password against the stored hash.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.db import Database
from core.errors import database_failure

from . import repository, schemas, security

logger = logging.getLogger(__name__)


def _missing(*values: str | None) -> bool:
    return any(value is None or value == "" for value in values)


async def signup(db: Database, payload: schemas.SignupRequest) -> schemas.SignupResponse:
    if _missing(payload.username, payload.email, payload.password):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="username, email, and password are required",
        )

    try:
        password_hash = security.hash_password(str(payload.password))
    except security.PasswordError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    with database_failure("Failed to create user", log=logger, event="user_create_failed"):
        user_id = await repository.create_user(
            db,
            username=str(payload.username),
            email=str(payload.email),
            password_hash=password_hash,
        )

    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username or email already exists",
        )

    logger.info("user_created id=%s", user_id)
    return schemas.SignupResponse(
        message="User created successfully",
        userId=user_id,
        username=str(payload.username),
    )


async def login(db: Database, payload: schemas.LoginRequest) -> schemas.LoginResponse:
    if _missing(payload.username, payload.password):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="username and password are required",
        )

    with database_failure("Failed to login", log=logger, event="user_login_failed"):
        user_row = await repository.get_user_by_username(db, str(payload.username))

    if user_row is None or not security.verify_password(
        str(payload.password), str(user_row.get("password") or "")
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )

    return schemas.LoginResponse(
        message="Login successful",
        user=schemas.UserResponse(
            id=int(user_row["id"]),
            username=str(user_row["username"]),
            email=str(user_row["email"]),
        ),
    )
