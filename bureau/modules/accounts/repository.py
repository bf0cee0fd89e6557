"""Repository protocol for accounts."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .models import Account


class AccountRepository(Protocol):
    """Abstract repository interface for account persistence.

    Counter mutations are applied by the store as single conditional
    updates so that concurrent attempts never overwrite each other.
    """

    async def get_by_id(self, account_id: str) -> Account | None:
        ...

    async def get_by_identifier(self, identifier: str) -> Account | None:
        ...

    async def find_conflict(self, *, username: str, email: str) -> Account | None:
        ...

    async def create_account(
        self,
        *,
        username: str,
        email: str,
        name: str,
        password_hash: str,
        role: str,
        is_active: bool,
    ) -> Account:
        ...

    async def record_failed_attempt(
        self,
        account_id: str,
        *,
        now: datetime,
        threshold: int,
        lock_until: datetime,
    ) -> Account | None:
        ...

    async def record_successful_login(self, account_id: str, *, now: datetime) -> Account | None:
        ...

    async def update_password(self, account_id: str, password_hash: str) -> Account:
        ...

    async def unlock(self, account_id: str) -> Account:
        ...
