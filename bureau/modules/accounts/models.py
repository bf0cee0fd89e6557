"""Domain models for administrative accounts and their lockout state."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

ROLE_ADMIN = "admin"
ROLE_SUPER_ADMIN = "super-admin"
ROLES = frozenset({ROLE_ADMIN, ROLE_SUPER_ADMIN})


@dataclass(frozen=True, slots=True)
class Unlocked:
    pass


@dataclass(frozen=True, slots=True)
class Locked:
    until: datetime


LockState = Union[Unlocked, Locked]

UNLOCKED = Unlocked()


def lock_state(locked_until: Optional[datetime], now: datetime) -> LockState:
    """Locked exactly while ``locked_until`` lies strictly in the future."""
    if locked_until is not None and locked_until > now:
        return Locked(until=locked_until)
    return UNLOCKED


@dataclass(frozen=True, slots=True)
class AccountProfile:
    """Public projection of an account; never carries the hash or counters."""

    id: str
    username: str
    email: str
    name: str
    role: str


@dataclass(slots=True)
class Account:
    id: str
    username: str
    email: str
    name: str
    role: str
    is_active: bool
    password_hash: str = field(repr=False)
    failed_attempts: int = 0
    locked_until: Optional[datetime] = None
    last_login_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_super_admin(self) -> bool:
        return self.role == ROLE_SUPER_ADMIN

    def lock_state(self, now: datetime) -> LockState:
        return lock_state(self.locked_until, now)

    def is_locked(self, now: datetime) -> bool:
        return isinstance(self.lock_state(now), Locked)

    def profile(self) -> AccountProfile:
        return AccountProfile(
            id=self.id,
            username=self.username,
            email=self.email,
            name=self.name,
            role=self.role,
        )


@dataclass(slots=True)
class AccountCreateInput:
    username: str
    email: str
    password: str
    name: str
    role: str = ROLE_ADMIN
    is_active: bool = True


class AuthFailure(str, Enum):
    INVALID_CREDENTIALS = "invalid_credentials"
    ACCOUNT_DEACTIVATED = "account_deactivated"
    ACCOUNT_LOCKED = "account_locked"
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"


T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class AuthOutcome(Generic[T]):
    """Either a value or the kind of expected failure that prevented it."""

    value: Optional[T] = None
    failure: Optional[AuthFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "AuthOutcome[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, failure: AuthFailure) -> "AuthOutcome[T]":
        return cls(failure=failure)
