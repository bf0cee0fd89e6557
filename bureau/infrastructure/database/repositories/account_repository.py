"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, and_, case, literal, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bureau.core.timeutils import ensure_utc
from bureau.db.models import Account as AccountModel
from bureau.modules.accounts.exceptions import AccountNotFoundError
from bureau.modules.accounts.models import Account
from bureau.modules.accounts.repository import AccountRepository


class SqlAccountRepository(AccountRepository):
    """Account repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, account_id: str) -> Account | None:
        return self._to_domain(await self._load(account_id))

    async def get_by_identifier(self, identifier: str) -> Account | None:
        email = identifier.strip().lower()
        stmt = (
            select(AccountModel)
            .where(or_(AccountModel.username == identifier, AccountModel.email == email))
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def find_conflict(self, *, username: str, email: str) -> Account | None:
        stmt = (
            select(AccountModel)
            .where(or_(AccountModel.username == username, AccountModel.email == email.lower()))
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

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
        model = AccountModel(
            username=username,
            email=email.lower(),
            name=name,
            password_hash=password_hash,
            role=role,
            is_active=is_active,
            failed_attempts=0,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def record_failed_attempt(
        self,
        account_id: str,
        *,
        now: datetime,
        threshold: int,
        lock_until: datetime,
    ) -> Account | None:
        # Evaluated against the row's current values inside one UPDATE.
        lock_expired = and_(
            AccountModel.locked_until.is_not(None),
            AccountModel.locked_until <= now,
        )
        next_attempts = case((lock_expired, 1), else_=AccountModel.failed_attempts + 1)
        next_lock = case(
            (next_attempts >= threshold, literal(lock_until, DateTime(timezone=True))),
            else_=None,
        )
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id)
            .values(failed_attempts=next_attempts, locked_until=next_lock, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        await self._session.execute(stmt)
        return self._to_domain(await self._load(account_id, refresh=True))

    async def record_successful_login(self, account_id: str, *, now: datetime) -> Account | None:
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id)
            .values(failed_attempts=0, locked_until=None, last_login_at=now, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        await self._session.execute(stmt)
        return self._to_domain(await self._load(account_id, refresh=True))

    async def update_password(self, account_id: str, password_hash: str) -> Account:
        model = await self._load(account_id)
        if model is None:
            raise AccountNotFoundError(account_id)
        model.password_hash = password_hash
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def unlock(self, account_id: str) -> Account:
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id)
            .values(failed_attempts=0, locked_until=None)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise AccountNotFoundError(account_id)
        return self._to_domain(await self._load(account_id, refresh=True))

    async def _load(self, account_id: str, *, refresh: bool = False) -> AccountModel | None:
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_domain(model: AccountModel | None) -> Account | None:
        if model is None:
            return None
        return Account(
            id=str(model.id),
            username=model.username,
            email=model.email,
            name=model.name,
            role=model.role,
            is_active=bool(model.is_active),
            password_hash=model.password_hash,
            failed_attempts=model.failed_attempts or 0,
            locked_until=ensure_utc(model.locked_until),
            last_login_at=ensure_utc(model.last_login_at),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )
