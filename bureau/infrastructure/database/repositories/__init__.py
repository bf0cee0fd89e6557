"""SQLAlchemy-backed repository implementations."""

from .account_repository import SqlAccountRepository
from .contact_repository import SqlContactRepository
from .project_repository import SqlProjectRepository

__all__ = [
    "SqlAccountRepository",
    "SqlContactRepository",
    "SqlProjectRepository",
]
