"""SQLAlchemy implementation of the project repository."""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bureau.core.timeutils import ensure_utc
from bureau.db.models import Project as ProjectModel
from bureau.modules.projects.models import Project, ProjectImage, ProjectInput
from bureau.modules.projects.repository import ProjectRepository

SHOWCASE_ORDER = (
    ProjectModel.featured.desc(),
    ProjectModel.order.asc(),
    ProjectModel.created_at.desc(),
)


class SqlProjectRepository(ProjectRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, project_id: str, *, statuses: Optional[Sequence[str]] = None) -> Project | None:
        stmt = select(ProjectModel).where(ProjectModel.id == project_id)
        if statuses is not None:
            stmt = stmt.where(ProjectModel.status.in_(statuses))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_showcase(
        self,
        *,
        statuses: Sequence[str],
        category: Optional[str] = None,
        featured_only: bool = False,
        limit: Optional[int] = None,
    ) -> list[Project]:
        stmt = select(ProjectModel).where(ProjectModel.status.in_(statuses))
        if category:
            stmt = stmt.where(ProjectModel.category == category)
        if featured_only:
            stmt = stmt.where(ProjectModel.featured.is_(True))
        stmt = stmt.order_by(*SHOWCASE_ORDER)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_projects(
        self,
        *,
        offset: int,
        limit: int,
        status: Optional[str] = None,
        category: Optional[str] = None,
    ) -> tuple[list[Project], int]:
        stmt = select(ProjectModel)
        count_stmt = select(func.count()).select_from(ProjectModel)
        if status:
            stmt = stmt.where(ProjectModel.status == status)
            count_stmt = count_stmt.where(ProjectModel.status == status)
        if category:
            stmt = stmt.where(ProjectModel.category == category)
            count_stmt = count_stmt.where(ProjectModel.category == category)

        stmt = stmt.order_by(ProjectModel.created_at.desc()).offset(offset).limit(limit)
        result = await self._session.execute(stmt)
        total = await self._session.scalar(count_stmt)
        return [self._to_domain(model) for model in result.scalars().all()], int(total or 0)

    async def count_by_category(self, *, statuses: Sequence[str]) -> dict[str, int]:
        stmt = (
            select(ProjectModel.category, func.count())
            .where(ProjectModel.status.in_(statuses))
            .group_by(ProjectModel.category)
        )
        result = await self._session.execute(stmt)
        return {category: count for category, count in result.all()}

    async def create(self, payload: ProjectInput) -> Project:
        model = ProjectModel()
        self._apply(model, payload)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def replace(self, project_id: str, payload: ProjectInput) -> Project | None:
        model = await self._session.get(ProjectModel, project_id)
        if model is None:
            return None
        self._apply(model, payload)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def delete(self, project_id: str) -> bool:
        model = await self._session.get(ProjectModel, project_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    @staticmethod
    def _apply(model: ProjectModel, payload: ProjectInput) -> None:
        model.title = payload.title
        model.description = payload.description
        model.long_description = payload.long_description or None
        model.category = payload.category
        model.technologies = list(payload.technologies)
        model.features = list(payload.features)
        model.images = [image.to_dict() for image in payload.images]
        model.links = payload.links
        model.client = payload.client
        model.metrics = payload.metrics
        model.status = payload.status
        model.featured = payload.featured
        model.order = payload.order

    @staticmethod
    def _to_domain(model: ProjectModel) -> Project:
        return Project(
            id=str(model.id),
            title=model.title,
            description=model.description,
            category=model.category,
            technologies=list(model.technologies or []),
            features=list(model.features or []),
            images=[ProjectImage.from_dict(item) for item in model.images or []],
            long_description=model.long_description,
            links=model.links,
            client=model.client,
            metrics=model.metrics,
            status=model.status,
            featured=bool(model.featured),
            order=model.order or 0,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )
