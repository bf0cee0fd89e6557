"""Access to the application container attached at startup."""

from fastapi import Request

from bureau.core.container import ApplicationContainer


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


__all__ = ["get_container"]
