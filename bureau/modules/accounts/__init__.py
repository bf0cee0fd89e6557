"""Account domain services and models."""

from .exceptions import (
    AccountAlreadyExistsError,
    AccountError,
    AccountNotFoundError,
    InvalidRoleError,
)
from .guard import AccountGuard
from .models import (
    ROLE_ADMIN,
    ROLE_SUPER_ADMIN,
    ROLES,
    UNLOCKED,
    Account,
    AccountCreateInput,
    AccountProfile,
    AuthFailure,
    AuthOutcome,
    Locked,
    LockState,
    Unlocked,
    lock_state,
)
from .service import AccountService

__all__ = [
    "Account",
    "AccountCreateInput",
    "AccountGuard",
    "AccountProfile",
    "AccountService",
    "AccountError",
    "AccountAlreadyExistsError",
    "AccountNotFoundError",
    "AuthFailure",
    "AuthOutcome",
    "InvalidRoleError",
    "Locked",
    "LockState",
    "ROLE_ADMIN",
    "ROLE_SUPER_ADMIN",
    "ROLES",
    "UNLOCKED",
    "Unlocked",
    "lock_state",
]
