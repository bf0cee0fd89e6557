"""Per-client request throttling."""

import logging

from fastapi import Depends, HTTPException, Request, status

from bureau.core.container import ApplicationContainer

from .container import get_container

logger = logging.getLogger(__name__)


def client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def enforce_contact_rate_limit(
    request: Request,
    container: ApplicationContainer = Depends(get_container),
) -> None:
    limiter = container.contact_limiter
    key = client_ip(request)
    allowed, remaining = limiter.check(key)
    if not allowed:
        logger.warning("Contact rate limit exceeded for %s", key)
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too many contact form submissions. Please try again in 15 minutes.",
            headers={
                "Retry-After": str(limiter.config.window),
                "X-RateLimit-Limit": str(limiter.config.calls),
                "X-RateLimit-Remaining": "0",
            },
        )
    limiter.record(key)


__all__ = ["client_ip", "enforce_contact_rate_limit"]
