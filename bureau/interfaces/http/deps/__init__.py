"""Reusable FastAPI dependencies."""

from .account import (
    get_account_guard,
    get_account_repository,
    get_account_service,
    get_current_admin,
    get_super_admin,
)
from .container import get_container
from .database import get_db_session
from .rate_limit import client_ip, enforce_contact_rate_limit
from .services import get_contact_mailer, get_contact_service, get_project_service

__all__ = [
    "get_account_guard",
    "get_account_repository",
    "client_ip",
    "enforce_contact_rate_limit",
    "get_account_service",
    "get_contact_mailer",
    "get_contact_service",
    "get_container",
    "get_current_admin",
    "get_db_session",
    "get_project_service",
    "get_super_admin",
]
