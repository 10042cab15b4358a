"""
Password hashing helpers.
"""

from __future__ import annotations

import bcrypt

from core.settings import env_int

# bcrypt only looks at the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72


class PasswordError(ValueError):
    pass


def bcrypt_rounds() -> int:
    # bcrypt accepts cost factors 4..31.
    return min(max(env_int("BCRYPT_ROUNDS", 12), 4), 31)


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise PasswordError("Password is empty.")
    if len(password) > MAX_PASSWORD_BYTES:
        raise PasswordError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes.")
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=bcrypt_rounds())).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed or len(password) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False
