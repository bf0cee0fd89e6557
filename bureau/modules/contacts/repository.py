"""Repository protocol for contact submissions."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from .models import Contact, ContactSubmission


class ContactRepository(Protocol):
    async def create_contact(
        self,
        submission: ContactSubmission,
        *,
        ip_address: Optional[str],
        user_agent: Optional[str],
        created_at: datetime,
    ) -> Contact:
        ...

    async def has_recent_submission(self, email: str, *, since: datetime) -> bool:
        ...

    async def list_contacts(
        self,
        *,
        offset: int,
        limit: int,
        status: Optional[str] = None,
    ) -> tuple[list[Contact], int]:
        ...

    async def update_status(self, contact_id: str, *, status: str, notes: Optional[str]) -> Contact:
        ...

    async def count(self, *, since: Optional[datetime] = None) -> int:
        ...

    async def count_by_status(self) -> dict[str, int]:
        ...
