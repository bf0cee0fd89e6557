"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Any, Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None


class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


# --- auth -----------------------------------------------------------------


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, description="Username or email")
    password: str = Field(..., min_length=1)


class AccountCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=30)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=1, max_length=100)
    role: Literal["admin", "super-admin"] = "admin"

    @field_validator("username", "name", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6)


class AccountResponse(BaseModel):
    id: str
    username: str
    email: str
    name: str
    role: str

    model_config = ConfigDict(from_attributes=True)


class AccountDetailResponse(AccountResponse):
    last_login_at: Optional[datetime] = None


class AccountStatusResponse(AccountResponse):
    is_active: bool
    failed_attempts: int
    locked_until: Optional[datetime] = None


class AuthData(BaseModel):
    token: str
    admin: AccountResponse


class AdminData(BaseModel):
    admin: AccountDetailResponse


# --- contacts -------------------------------------------------------------

ProjectTypeOption = Literal[
    "Business Website",
    "E-commerce Platform",
    "Web Application",
    "Portfolio Site",
    "Landing Page",
    "API Development",
    "Maintenance & Support",
    "Other",
    "",
]
BudgetOption = Literal[
    "$2,000 - $5,000",
    "$5,000 - $10,000",
    "$10,000 - $25,000",
    "$25,000 - $50,000",
    "$50,000+",
    "",
]
TimelineOption = Literal[
    "ASAP",
    "1-2 weeks",
    "1 month",
    "2-3 months",
    "3+ months",
    "Just exploring",
    "",
]
ContactStatus = Literal["new", "contacted", "in-progress", "converted", "closed"]


class ContactCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    company: Optional[str] = Field(default=None, max_length=100)
    project_type: Optional[ProjectTypeOption] = None
    budget: Optional[BudgetOption] = None
    timeline: Optional[TimelineOption] = None
    message: str = Field(..., min_length=10, max_length=2000)

    @field_validator("name", "company", "message", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value


class ContactReceipt(BaseModel):
    id: str
    submitted_at: Optional[datetime] = None


class ContactResponse(BaseModel):
    id: str
    name: str
    email: str
    company: Optional[str] = None
    project_type: Optional[str] = None
    budget: Optional[str] = None
    timeline: Optional[str] = None
    message: str
    status: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ContactListData(BaseModel):
    contacts: list[ContactResponse]
    pagination: Pagination


class ContactStatusUpdate(BaseModel):
    status: ContactStatus
    notes: Optional[str] = Field(default=None, max_length=1000)


class ContactStatsResponse(BaseModel):
    total: int
    this_month: int
    by_status: dict[str, int]


# --- projects -------------------------------------------------------------

ProjectCategory = Literal["Full-Stack", "Frontend", "Backend", "Mobile", "Design"]
ProjectStatus = Literal["active", "completed", "archived", "draft"]
URL_PATTERN = r"^https?://"


class ProjectImageSchema(BaseModel):
    url: str = Field(..., pattern=URL_PATTERN)
    alt: str = Field(..., min_length=1)
    is_primary: bool = False

    model_config = ConfigDict(from_attributes=True)


class ProjectLinks(BaseModel):
    live: Optional[str] = Field(default=None, pattern=URL_PATTERN)
    github: Optional[str] = Field(default=None, pattern=URL_PATTERN)
    case_study: Optional[str] = Field(default=None, pattern=URL_PATTERN)

    @field_validator("live", "github", "case_study", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        return None if value == "" else value


class ProjectClient(BaseModel):
    name: Optional[str] = None
    industry: Optional[str] = None
    website: Optional[str] = Field(default=None, pattern=URL_PATTERN)

    @field_validator("website", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        return None if value == "" else value


class ProjectMetrics(BaseModel):
    duration: Optional[str] = None
    team_size: Optional[int] = Field(default=None, ge=1)
    impact: Optional[str] = None


class ProjectCreate(BaseModel):
    title: str = Field(..., min_length=3, max_length=100)
    description: str = Field(..., min_length=10, max_length=500)
    long_description: Optional[str] = Field(default=None, max_length=2000)
    category: ProjectCategory
    technologies: list[str] = Field(..., min_length=1)
    features: list[str] = Field(..., min_length=1)
    images: list[ProjectImageSchema] = Field(..., min_length=1)
    links: Optional[ProjectLinks] = None
    client: Optional[ProjectClient] = None
    metrics: Optional[ProjectMetrics] = None
    status: ProjectStatus = "draft"
    featured: bool = False
    order: int = 0

    @field_validator("title", "description", "long_description", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("technologies", "features")
    @classmethod
    def _strip_items(cls, value: list[str]) -> list[str]:
        return [item.strip() for item in value]


class ProjectResponse(BaseModel):
    id: str
    title: str
    description: str
    long_description: Optional[str] = None
    category: str
    technologies: list[str]
    features: list[str]
    images: list[ProjectImageSchema]
    links: Optional[dict[str, Any]] = None
    client: Optional[dict[str, Any]] = None
    metrics: Optional[dict[str, Any]] = None
    status: str
    featured: bool
    order: int

    model_config = ConfigDict(from_attributes=True)


class ProjectAdminResponse(ProjectResponse):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProjectListData(BaseModel):
    projects: list[ProjectAdminResponse]
    pagination: Pagination


class CategoryCountResponse(BaseModel):
    category: str
    count: int

    model_config = ConfigDict(from_attributes=True)


class HealthResponse(BaseModel):
    status: str
    message: str
    timestamp: datetime
    version: str
