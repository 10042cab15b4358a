"""
Runtime settings read from the environment.

A `.env` file in the working directory is loaded first (if present), so local
development does not need exported variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_POOL_SIZE = 10
DEFAULT_PORT = 3000


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "articles"
    db_ssl_ca: str | None = None
    db_pool_size: int = DEFAULT_POOL_SIZE
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ("*",)


def load_settings() -> Settings:
    load_dotenv()
    pool_size = env_int("DB_POOL_SIZE", DEFAULT_POOL_SIZE)
    return Settings(
        db_host=_env_str("DB_HOST", "localhost"),
        db_port=env_int("DB_PORT", 5432),
        db_user=_env_str("DB_USER", "postgres"),
        db_password=os.environ.get("DB_PASSWORD", ""),
        db_name=_env_str("DB_NAME", "articles"),
        db_ssl_ca=os.environ.get("DB_SSL_CA", "").strip() or None,
        db_pool_size=pool_size if pool_size > 0 else DEFAULT_POOL_SIZE,
        host=_env_str("HOST", "0.0.0.0"),
        port=env_int("PORT", DEFAULT_PORT),
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
        cors_origins=tuple(_env_list("CORS_ORIGINS", ["*"])),
    )
