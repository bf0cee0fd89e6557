"""SQLAlchemy implementation of the contact repository."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bureau.core.timeutils import ensure_utc
from bureau.db.models import Contact as ContactModel
from bureau.modules.contacts.exceptions import ContactNotFoundError
from bureau.modules.contacts.models import Contact, ContactSubmission
from bureau.modules.contacts.repository import ContactRepository


class SqlContactRepository(ContactRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create_contact(
        self,
        submission: ContactSubmission,
        *,
        ip_address: Optional[str],
        user_agent: Optional[str],
        created_at: datetime,
    ) -> Contact:
        model = ContactModel(
            name=submission.name,
            email=submission.email,
            company=submission.company or None,
            project_type=submission.project_type or None,
            budget=submission.budget or None,
            timeline=submission.timeline or None,
            message=submission.message,
            status="new",
            ip_address=ip_address,
            user_agent=user_agent,
            created_at=created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def has_recent_submission(self, email: str, *, since: datetime) -> bool:
        stmt = (
            select(ContactModel.id)
            .where(ContactModel.email == email, ContactModel.created_at >= since)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_contacts(
        self,
        *,
        offset: int,
        limit: int,
        status: Optional[str] = None,
    ) -> tuple[list[Contact], int]:
        stmt = select(ContactModel)
        count_stmt = select(func.count()).select_from(ContactModel)
        if status:
            stmt = stmt.where(ContactModel.status == status)
            count_stmt = count_stmt.where(ContactModel.status == status)

        stmt = stmt.order_by(ContactModel.created_at.desc()).offset(offset).limit(limit)
        result = await self._session.execute(stmt)
        total = await self._session.scalar(count_stmt)
        return [self._to_domain(model) for model in result.scalars().all()], int(total or 0)

    async def update_status(self, contact_id: str, *, status: str, notes: Optional[str]) -> Contact:
        model = await self._session.get(ContactModel, contact_id)
        if model is None:
            raise ContactNotFoundError(contact_id)

        model.status = status
        if notes:
            model.notes = notes
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def count(self, *, since: Optional[datetime] = None) -> int:
        stmt = select(func.count()).select_from(ContactModel)
        if since is not None:
            stmt = stmt.where(ContactModel.created_at >= since)
        return int(await self._session.scalar(stmt) or 0)

    async def count_by_status(self) -> dict[str, int]:
        stmt = select(ContactModel.status, func.count()).group_by(ContactModel.status)
        result = await self._session.execute(stmt)
        return {status: count for status, count in result.all()}

    @staticmethod
    def _to_domain(model: ContactModel) -> Contact:
        return Contact(
            id=str(model.id),
            name=model.name,
            email=model.email,
            message=model.message,
            status=model.status,
            company=model.company,
            project_type=model.project_type,
            budget=model.budget,
            timeline=model.timeline,
            notes=model.notes,
            ip_address=model.ip_address,
            user_agent=model.user_agent,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )
