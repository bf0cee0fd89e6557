"""Portfolio endpoints: public listing plus admin CRUD."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from bureau.interfaces.http.deps import get_current_admin, get_project_service
from bureau.modules.accounts import Account
from bureau.modules.projects import (
    InvalidProjectImagesError,
    ProjectImage,
    ProjectInput,
    ProjectNotFoundError,
    ProjectService,
)
from bureau.schemas import (
    CategoryCountResponse,
    Envelope,
    Pagination,
    ProjectAdminResponse,
    ProjectCreate,
    ProjectListData,
    ProjectResponse,
    ProjectStatus,
    SuccessResponse,
)

router = APIRouter()


def _to_input(payload: ProjectCreate) -> ProjectInput:
    return ProjectInput(
        title=payload.title,
        description=payload.description,
        long_description=payload.long_description,
        category=payload.category,
        technologies=payload.technologies,
        features=payload.features,
        images=[ProjectImage(url=image.url, alt=image.alt, is_primary=image.is_primary) for image in payload.images],
        links=payload.links.model_dump() if payload.links else None,
        client=payload.client.model_dump() if payload.client else None,
        metrics=payload.metrics.model_dump() if payload.metrics else None,
        status=payload.status,
        featured=payload.featured,
        order=payload.order,
    )


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")


@router.get("", response_model=Envelope[list[ProjectResponse]], summary="Public projects")
async def list_projects(
    category: Optional[str] = None,
    featured: bool = False,
    service: ProjectService = Depends(get_project_service),
):
    projects = await service.list_public(category=category, featured_only=featured)
    return Envelope[list[ProjectResponse]](data=[ProjectResponse.model_validate(project) for project in projects])


@router.get("/categories", response_model=Envelope[list[CategoryCountResponse]], summary="Categories with counts")
async def list_categories(service: ProjectService = Depends(get_project_service)):
    categories = await service.categories()
    return Envelope[list[CategoryCountResponse]](
        data=[CategoryCountResponse.model_validate(item) for item in categories]
    )


@router.get("/featured", response_model=Envelope[list[ProjectResponse]], summary="Featured projects")
async def list_featured(service: ProjectService = Depends(get_project_service)):
    projects = await service.featured()
    return Envelope[list[ProjectResponse]](data=[ProjectResponse.model_validate(project) for project in projects])


@router.get("/admin/all", response_model=Envelope[ProjectListData], summary="All projects including drafts")
async def list_all_projects(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    status_filter: Optional[ProjectStatus] = Query(None, alias="status"),
    category: Optional[str] = None,
    _: Account = Depends(get_current_admin),
    service: ProjectService = Depends(get_project_service),
):
    result = await service.list_admin(page=page, limit=limit, status=status_filter, category=category)
    return Envelope[ProjectListData](
        data=ProjectListData(
            projects=[ProjectAdminResponse.model_validate(project) for project in result.projects],
            pagination=Pagination(page=result.page, limit=result.limit, total=result.total, pages=result.pages),
        )
    )


@router.get("/{project_id}", response_model=Envelope[ProjectResponse], summary="Single public project")
async def get_project(project_id: str, service: ProjectService = Depends(get_project_service)):
    try:
        project = await service.get_public(project_id)
    except ProjectNotFoundError as exc:
        raise _not_found() from exc
    return Envelope[ProjectResponse](data=ProjectResponse.model_validate(project))


@router.post(
    "",
    response_model=Envelope[ProjectAdminResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
)
async def create_project(
    payload: ProjectCreate,
    _: Account = Depends(get_current_admin),
    service: ProjectService = Depends(get_project_service),
):
    try:
        project = await service.create(_to_input(payload))
    except InvalidProjectImagesError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return Envelope[ProjectAdminResponse](
        message="Project created successfully",
        data=ProjectAdminResponse.model_validate(project),
    )


@router.put("/{project_id}", response_model=Envelope[ProjectAdminResponse], summary="Replace a project")
async def update_project(
    project_id: str,
    payload: ProjectCreate,
    _: Account = Depends(get_current_admin),
    service: ProjectService = Depends(get_project_service),
):
    try:
        project = await service.update(project_id, _to_input(payload))
    except InvalidProjectImagesError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ProjectNotFoundError as exc:
        raise _not_found() from exc
    return Envelope[ProjectAdminResponse](
        message="Project updated successfully",
        data=ProjectAdminResponse.model_validate(project),
    )


@router.delete("/{project_id}", response_model=SuccessResponse, summary="Delete a project")
async def delete_project(
    project_id: str,
    _: Account = Depends(get_current_admin),
    service: ProjectService = Depends(get_project_service),
):
    try:
        await service.delete(project_id)
    except ProjectNotFoundError as exc:
        raise _not_found() from exc
    return SuccessResponse(message="Project deleted successfully")
