"""
User signup/login endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core.db import Database
from core.dependencies import get_db

from . import schemas, service

router = APIRouter(prefix="/users")


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=schemas.SignupResponse)
async def signup(
    request: schemas.SignupRequest | None = None,
    db: Database = Depends(get_db),
) -> schemas.SignupResponse:
    return await service.signup(db, request or schemas.SignupRequest())


@router.post("/login", response_model=schemas.LoginResponse)
async def login(
    request: schemas.LoginRequest | None = None,
    db: Database = Depends(get_db),
) -> schemas.LoginResponse:
    return await service.login(db, request or schemas.LoginRequest())
