"""Domain models for portfolio projects."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

PROJECT_CATEGORIES = ("Full-Stack", "Frontend", "Backend", "Mobile", "Design")
PROJECT_STATUSES = ("active", "completed", "archived", "draft")
PUBLIC_STATUSES = ("active", "completed")
ALL_CATEGORIES = "All"
FEATURED_LIMIT = 6


@dataclass(slots=True)
class ProjectImage:
    url: str
    alt: str
    is_primary: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "alt": self.alt, "is_primary": self.is_primary}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProjectImage":
        return cls(url=data["url"], alt=data["alt"], is_primary=bool(data.get("is_primary", False)))


@dataclass(slots=True)
class ProjectInput:
    title: str
    description: str
    category: str
    technologies: list[str]
    features: list[str]
    images: list[ProjectImage]
    long_description: Optional[str] = None
    links: Optional[dict[str, Any]] = None
    client: Optional[dict[str, Any]] = None
    metrics: Optional[dict[str, Any]] = None
    status: str = "draft"
    featured: bool = False
    order: int = 0


@dataclass(slots=True)
class Project:
    id: str
    title: str
    description: str
    category: str
    technologies: list[str] = field(default_factory=list)
    features: list[str] = field(default_factory=list)
    images: list[ProjectImage] = field(default_factory=list)
    long_description: Optional[str] = None
    links: Optional[dict[str, Any]] = None
    client: Optional[dict[str, Any]] = None
    metrics: Optional[dict[str, Any]] = None
    status: str = "draft"
    featured: bool = False
    order: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(slots=True)
class CategoryCount:
    category: str
    count: int


@dataclass(slots=True)
class ProjectPage:
    projects: list[Project]
    total: int
    page: int
    limit: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0
