"""Repository protocol for portfolio projects."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .models import Project, ProjectInput


class ProjectRepository(Protocol):
    async def get(self, project_id: str, *, statuses: Optional[Sequence[str]] = None) -> Project | None:
        ...

    async def list_showcase(
        self,
        *,
        statuses: Sequence[str],
        category: Optional[str] = None,
        featured_only: bool = False,
        limit: Optional[int] = None,
    ) -> list[Project]:
        ...

    async def list_projects(
        self,
        *,
        offset: int,
        limit: int,
        status: Optional[str] = None,
        category: Optional[str] = None,
    ) -> tuple[list[Project], int]:
        ...

    async def count_by_category(self, *, statuses: Sequence[str]) -> dict[str, int]:
        ...

    async def create(self, payload: ProjectInput) -> Project:
        ...

    async def replace(self, project_id: str, payload: ProjectInput) -> Project | None:
        ...

    async def delete(self, project_id: str) -> bool:
        ...
