"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from bureau.core.config import Settings
from bureau.core.rate_limit import CONTACT_RATE_LIMIT, RateLimiter
from bureau.core.security import JwtTokenIssuer
from bureau.core.timeutils import utcnow
from bureau.infrastructure.mail import EmailTransport, build_transport
from bureau.modules.contacts.notifications import ContactMailer


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    token_issuer: JwtTokenIssuer
    mail_transport: EmailTransport
    contact_limiter: RateLimiter = field(default_factory=lambda: RateLimiter(CONTACT_RATE_LIMIT))
    clock: Callable[[], datetime] = field(default=utcnow)

    @classmethod
    def from_settings(cls, settings: Settings, clock: Callable[[], datetime] = utcnow) -> "ApplicationContainer":
        return cls(
            settings=settings,
            token_issuer=JwtTokenIssuer.from_settings(settings, clock),
            mail_transport=build_transport(settings.mail),
            clock=clock,
        )

    @property
    def mailer(self) -> ContactMailer:
        return ContactMailer(self.mail_transport, self.settings.mail)


__all__ = ["ApplicationContainer"]
