"""Domain service for contact form submissions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional

from bureau.core.timeutils import utcnow

from .exceptions import DuplicateSubmissionError
from .models import Contact, ContactPage, ContactStats, ContactSubmission
from .repository import ContactRepository

logger = logging.getLogger(__name__)

DUPLICATE_WINDOW = timedelta(hours=1)


@dataclass(slots=True)
class ContactService:
    repository: ContactRepository
    duplicate_window: timedelta = DUPLICATE_WINDOW
    clock: Callable[[], datetime] = utcnow

    async def submit(
        self,
        submission: ContactSubmission,
        *,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Contact:
        now = self.clock()
        submission.email = submission.email.strip().lower()
        if self.duplicate_window and await self.repository.has_recent_submission(
            submission.email, since=now - self.duplicate_window
        ):
            raise DuplicateSubmissionError(submission.email)

        contact = await self.repository.create_contact(
            submission,
            ip_address=ip_address,
            user_agent=user_agent,
            created_at=now,
        )
        logger.info("Contact submission %s received", contact.id)
        return contact

    async def list_contacts(self, *, page: int = 1, limit: int = 10, status: Optional[str] = None) -> ContactPage:
        page = max(page, 1)
        limit = max(limit, 1)
        contacts, total = await self.repository.list_contacts(
            offset=(page - 1) * limit,
            limit=limit,
            status=status,
        )
        return ContactPage(contacts=contacts, total=total, page=page, limit=limit)

    async def update_status(self, contact_id: str, *, status: str, notes: Optional[str] = None) -> Contact:
        return await self.repository.update_status(contact_id, status=status, notes=notes or None)

    async def stats(self) -> ContactStats:
        now = self.clock()
        month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        return ContactStats(
            total=await self.repository.count(),
            this_month=await self.repository.count(since=month_start),
            by_status=await self.repository.count_by_status(),
        )
