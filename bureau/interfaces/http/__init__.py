from fastapi import APIRouter

from bureau.interfaces.http.routers import auth, contacts, projects


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(auth.router, prefix="/auth", tags=["auth"])
    router.include_router(contacts.router, prefix="/contact", tags=["contact"])
    router.include_router(projects.router, prefix="/projects", tags=["projects"])
    return router


__all__ = [
    "create_api_router",
]
