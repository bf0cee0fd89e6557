"""Contact and project service providers."""

from datetime import timedelta

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bureau.core.container import ApplicationContainer
from bureau.infrastructure.database.repositories import SqlContactRepository, SqlProjectRepository
from bureau.modules.contacts import ContactMailer, ContactService
from bureau.modules.projects import ProjectService

from .container import get_container
from .database import get_db_session


def get_contact_service(
    db: AsyncSession = Depends(get_db_session),
    container: ApplicationContainer = Depends(get_container),
) -> ContactService:
    return ContactService(
        SqlContactRepository(db),
        duplicate_window=timedelta(minutes=container.settings.contact.duplicate_window_minutes),
        clock=container.clock,
    )


def get_contact_mailer(container: ApplicationContainer = Depends(get_container)) -> ContactMailer:
    return container.mailer


def get_project_service(db: AsyncSession = Depends(get_db_session)) -> ProjectService:
    return ProjectService(SqlProjectRepository(db))


__all__ = [
    "get_contact_mailer",
    "get_contact_service",
    "get_project_service",
]
