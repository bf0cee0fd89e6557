"""Account related dependency providers."""

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bureau.core.container import ApplicationContainer
from bureau.infrastructure.database.repositories.account_repository import SqlAccountRepository
from bureau.modules.accounts import Account, AccountGuard, AccountService, AuthFailure

from .container import get_container
from .database import get_db_session

bearer_scheme = HTTPBearer(auto_error=False)

TOKEN_FAILURE_MESSAGES = {
    AuthFailure.TOKEN_EXPIRED: "Token expired",
    AuthFailure.TOKEN_INVALID: "Invalid token",
}


def get_account_repository(db: AsyncSession = Depends(get_db_session)) -> SqlAccountRepository:
    return SqlAccountRepository(db)


def get_account_service(
    repository: SqlAccountRepository = Depends(get_account_repository),
    container: ApplicationContainer = Depends(get_container),
) -> AccountService:
    return AccountService(repository, container.settings.security.bcrypt_rounds)


def get_account_guard(
    db: AsyncSession = Depends(get_db_session),
    container: ApplicationContainer = Depends(get_container),
) -> AccountGuard:
    return AccountGuard.with_session(db, container.token_issuer, container.settings.security, container.clock)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    guard: AccountGuard = Depends(get_account_guard),
    service: AccountService = Depends(get_account_service),
) -> Account:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise _unauthorized("No token provided")

    outcome = guard.verify_token(credentials.credentials)
    if not outcome.ok:
        raise _unauthorized(TOKEN_FAILURE_MESSAGES[outcome.failure])

    account = await service.get_by_id(outcome.value)
    if account is None:
        raise _unauthorized("Invalid token")
    if not account.is_active:
        raise _unauthorized("Account is deactivated")
    return account


async def get_super_admin(account: Account = Depends(get_current_admin)) -> Account:
    if not account.is_super_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. Super admin role required.",
        )
    return account


__all__ = [
    "bearer_scheme",
    "get_account_guard",
    "get_account_repository",
    "get_account_service",
    "get_current_admin",
    "get_super_admin",
]
