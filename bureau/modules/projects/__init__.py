"""Portfolio project services and models."""

from .exceptions import InvalidProjectImagesError, ProjectError, ProjectNotFoundError
from .models import (
    ALL_CATEGORIES,
    FEATURED_LIMIT,
    PROJECT_CATEGORIES,
    PROJECT_STATUSES,
    PUBLIC_STATUSES,
    CategoryCount,
    Project,
    ProjectImage,
    ProjectInput,
    ProjectPage,
)
from .service import ProjectService, normalize_images

__all__ = [
    "ALL_CATEGORIES",
    "CategoryCount",
    "FEATURED_LIMIT",
    "InvalidProjectImagesError",
    "PROJECT_CATEGORIES",
    "PROJECT_STATUSES",
    "PUBLIC_STATUSES",
    "Project",
    "ProjectError",
    "ProjectImage",
    "ProjectInput",
    "ProjectNotFoundError",
    "ProjectPage",
    "ProjectService",
    "normalize_images",
]
