"""Domain service for the public portfolio and its administration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidProjectImagesError, ProjectNotFoundError
from .models import (
    ALL_CATEGORIES,
    FEATURED_LIMIT,
    PUBLIC_STATUSES,
    CategoryCount,
    Project,
    ProjectImage,
    ProjectInput,
    ProjectPage,
)
from .repository import ProjectRepository

logger = logging.getLogger(__name__)


def normalize_images(images: list[ProjectImage]) -> list[ProjectImage]:
    """At most one primary image; the first one becomes primary when none is marked."""
    primary = [image for image in images if image.is_primary]
    if len(primary) > 1:
        raise InvalidProjectImagesError("Only one image can be marked as primary")
    if not primary and images:
        images[0].is_primary = True
    return images


def _category_filter(category: Optional[str]) -> Optional[str]:
    if not category or category == ALL_CATEGORIES:
        return None
    return category


@dataclass(slots=True)
class ProjectService:
    repository: ProjectRepository

    async def list_public(self, *, category: Optional[str] = None, featured_only: bool = False) -> list[Project]:
        return await self.repository.list_showcase(
            statuses=PUBLIC_STATUSES,
            category=_category_filter(category),
            featured_only=featured_only,
        )

    async def featured(self, limit: int = FEATURED_LIMIT) -> list[Project]:
        return await self.repository.list_showcase(
            statuses=PUBLIC_STATUSES,
            featured_only=True,
            limit=limit,
        )

    async def categories(self) -> list[CategoryCount]:
        counts = await self.repository.count_by_category(statuses=PUBLIC_STATUSES)
        result = [CategoryCount(category=ALL_CATEGORIES, count=sum(counts.values()))]
        result.extend(CategoryCount(category=name, count=counts[name]) for name in sorted(counts))
        return result

    async def get_public(self, project_id: str) -> Project:
        project = await self.repository.get(project_id, statuses=PUBLIC_STATUSES)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    async def list_admin(
        self,
        *,
        page: int = 1,
        limit: int = 10,
        status: Optional[str] = None,
        category: Optional[str] = None,
    ) -> ProjectPage:
        page = max(page, 1)
        limit = max(limit, 1)
        projects, total = await self.repository.list_projects(
            offset=(page - 1) * limit,
            limit=limit,
            status=status,
            category=_category_filter(category),
        )
        return ProjectPage(projects=projects, total=total, page=page, limit=limit)

    async def create(self, payload: ProjectInput) -> Project:
        payload.images = normalize_images(payload.images)
        project = await self.repository.create(payload)
        logger.info("Project %s created (%s)", project.id, project.title)
        return project

    async def update(self, project_id: str, payload: ProjectInput) -> Project:
        payload.images = normalize_images(payload.images)
        project = await self.repository.replace(project_id, payload)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    async def delete(self, project_id: str) -> None:
        if not await self.repository.delete(project_id):
            raise ProjectNotFoundError(project_id)
        logger.info("Project %s deleted", project_id)
