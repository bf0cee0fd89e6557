"""Utilities for password hashing and verification."""

from __future__ import annotations

from typing import Optional

import bcrypt

DEFAULT_ROUNDS = 12


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash plain text password using bcrypt."""
    salt = bcrypt.gensalt(rounds=rounds or DEFAULT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain text password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


__all__ = ["DEFAULT_ROUNDS", "hash_password", "verify_password"]
