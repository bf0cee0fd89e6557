"""Credential verification, lockout and session tokens for admin accounts.

The guard holds no state between calls. Lock status is a pure function of
the stored ``locked_until`` and the current time, evaluated on every
attempt; nothing sweeps expired locks in the background. Expected failures
are returned as :class:`AuthOutcome` values, while persistence errors
propagate unchanged.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta
from functools import lru_cache
from typing import Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from bureau.core.config import SecuritySettings
from bureau.core.crypto import hash_password, verify_password
from bureau.core.security import JwtTokenIssuer, TokenExpiredError, TokenInvalidError
from bureau.core.timeutils import utcnow

from .models import AccountProfile, AuthFailure, AuthOutcome
from .repository import AccountRepository

logger = logging.getLogger(__name__)

MAX_FAILED_ATTEMPTS = 5
LOCKOUT_DURATION = timedelta(hours=2)
TOKEN_TTL = timedelta(days=7)


@lru_cache(maxsize=None)
def _decoy_hash(rounds: Optional[int]) -> str:
    return hash_password("decoy-password", rounds)


class AccountGuard:
    def __init__(
        self,
        repository: AccountRepository,
        tokens: JwtTokenIssuer,
        *,
        max_failed_attempts: int = MAX_FAILED_ATTEMPTS,
        lockout_duration: timedelta = LOCKOUT_DURATION,
        token_ttl: timedelta = TOKEN_TTL,
        bcrypt_rounds: Optional[int] = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._repository = repository
        self._tokens = tokens
        self._max_failed_attempts = max_failed_attempts
        self._lockout_duration = lockout_duration
        self._token_ttl = token_ttl
        self._bcrypt_rounds = bcrypt_rounds
        self._clock = clock

    @classmethod
    def with_session(
        cls,
        session: AsyncSession,
        tokens: JwtTokenIssuer,
        security: SecuritySettings,
        clock: Callable[[], datetime] = utcnow,
    ) -> "AccountGuard":
        from bureau.infrastructure.database.repositories.account_repository import SqlAccountRepository

        return cls(
            SqlAccountRepository(session),
            tokens,
            max_failed_attempts=security.max_failed_attempts,
            lockout_duration=timedelta(minutes=security.lockout_minutes),
            token_ttl=timedelta(minutes=security.access_token_expire_minutes),
            bcrypt_rounds=security.bcrypt_rounds,
            clock=clock,
        )

    async def authenticate(self, identifier: str, password: str) -> AuthOutcome[AccountProfile]:
        account = await self._repository.get_by_identifier(identifier)
        if account is None:
            # Burn a hash comparison so unknown identifiers cost the same as wrong passwords.
            decoy = await asyncio.to_thread(_decoy_hash, self._bcrypt_rounds)
            await self._check_password(password, decoy)
            return AuthOutcome.fail(AuthFailure.INVALID_CREDENTIALS)

        if not account.is_active:
            logger.info("Login rejected for deactivated account %s", account.id)
            return AuthOutcome.fail(AuthFailure.ACCOUNT_DEACTIVATED)

        now = self._clock()
        if account.is_locked(now):
            logger.info("Login rejected for locked account %s", account.id)
            return AuthOutcome.fail(AuthFailure.ACCOUNT_LOCKED)

        if not await self._check_password(password, account.password_hash):
            updated = await self._repository.record_failed_attempt(
                account.id,
                now=now,
                threshold=self._max_failed_attempts,
                lock_until=now + self._lockout_duration,
            )
            if updated is not None and updated.is_locked(now):
                logger.warning(
                    "Account %s locked until %s after %d failed attempts",
                    updated.id,
                    updated.locked_until.isoformat(),
                    updated.failed_attempts,
                )
            return AuthOutcome.fail(AuthFailure.INVALID_CREDENTIALS)

        updated = await self._repository.record_successful_login(account.id, now=now)
        return AuthOutcome.success((updated or account).profile())

    def issue_token(self, account_id: str) -> str:
        return self._tokens.sign(account_id, self._token_ttl)

    def verify_token(self, token: str) -> AuthOutcome[str]:
        try:
            claims = self._tokens.verify(token)
        except TokenExpiredError:
            return AuthOutcome.fail(AuthFailure.TOKEN_EXPIRED)
        except TokenInvalidError:
            return AuthOutcome.fail(AuthFailure.TOKEN_INVALID)
        return AuthOutcome.success(claims.account_id)

    async def change_password(
        self,
        account_id: str,
        current_password: str,
        new_password: str,
    ) -> AuthOutcome[AccountProfile]:
        # Lock state is not consulted: the caller already holds a valid session.
        account = await self._repository.get_by_id(account_id)
        if account is None or not await self._check_password(current_password, account.password_hash):
            return AuthOutcome.fail(AuthFailure.INVALID_CREDENTIALS)

        password_hash = await asyncio.to_thread(hash_password, new_password, self._bcrypt_rounds)
        updated = await self._repository.update_password(account.id, password_hash)
        logger.info("Password changed for account %s", account.id)
        return AuthOutcome.success(updated.profile())

    async def _check_password(self, password: str, password_hash: str) -> bool:
        # bcrypt is deliberately slow; keep it off the event loop.
        return await asyncio.to_thread(verify_password, password, password_hash)


__all__ = ["AccountGuard", "LOCKOUT_DURATION", "MAX_FAILED_ATTEMPTS", "TOKEN_TTL"]
