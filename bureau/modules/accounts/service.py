"""Domain services for account administration."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from bureau.core.crypto import hash_password

from .exceptions import AccountAlreadyExistsError, InvalidRoleError
from .models import ROLES, Account, AccountCreateInput
from .repository import AccountRepository

logger = logging.getLogger(__name__)


class AccountService:
    """Encapsulates account use cases outside of the login flow."""

    def __init__(self, repository: AccountRepository, bcrypt_rounds: Optional[int] = None) -> None:
        self._repository = repository
        self._bcrypt_rounds = bcrypt_rounds

    @classmethod
    def with_session(cls, session: AsyncSession, bcrypt_rounds: Optional[int] = None) -> "AccountService":
        from bureau.infrastructure.database.repositories.account_repository import SqlAccountRepository

        return cls(SqlAccountRepository(session), bcrypt_rounds)

    async def get_by_id(self, account_id: str) -> Account | None:
        return await self._repository.get_by_id(account_id)

    async def create_account(self, payload: AccountCreateInput) -> Account:
        if payload.role not in ROLES:
            raise InvalidRoleError(payload.role)

        existing = await self._repository.find_conflict(username=payload.username, email=payload.email)
        if existing is not None:
            raise AccountAlreadyExistsError(f"Admin with this email or username already exists: {payload.username}")

        password_hash = await asyncio.to_thread(hash_password, payload.password, self._bcrypt_rounds)
        account = await self._repository.create_account(
            username=payload.username,
            email=payload.email,
            name=payload.name,
            password_hash=password_hash,
            role=payload.role,
            is_active=payload.is_active,
        )
        logger.info("Created %s account %s (%s)", account.role, account.id, account.username)
        return account

    async def unlock(self, account_id: str) -> Account:
        return await self._repository.unlock(account_id)
