"""Domain models for contact form submissions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

CONTACT_STATUSES = ("new", "contacted", "in-progress", "converted", "closed")


@dataclass(slots=True)
class Contact:
    id: str
    name: str
    email: str
    message: str
    status: str = "new"
    company: Optional[str] = None
    project_type: Optional[str] = None
    budget: Optional[str] = None
    timeline: Optional[str] = None
    notes: Optional[str] = None
    ip_address: Optional[str] = field(default=None, repr=False)
    user_agent: Optional[str] = field(default=None, repr=False)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(slots=True)
class ContactSubmission:
    name: str
    email: str
    message: str
    company: Optional[str] = None
    project_type: Optional[str] = None
    budget: Optional[str] = None
    timeline: Optional[str] = None


@dataclass(slots=True)
class ContactPage:
    contacts: list[Contact]
    total: int
    page: int
    limit: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


@dataclass(slots=True)
class ContactStats:
    total: int
    this_month: int
    by_status: dict[str, int]
