"""Mail transports used for transactional notifications.

A single transport instance is built at startup by the application
container and handed to the services that need it.
"""

from __future__ import annotations

import logging
from email.message import EmailMessage
from typing import Protocol

import aiosmtplib

from bureau.core.config import MailSettings

logger = logging.getLogger(__name__)


class EmailTransport(Protocol):
    async def send(self, message: EmailMessage) -> None:
        ...


class SmtpTransport:
    """Delivers messages over SMTP via aiosmtplib, one connection per message."""

    def __init__(self, settings: MailSettings) -> None:
        self.settings = settings

    async def send(self, message: EmailMessage) -> None:
        try:
            await aiosmtplib.send(
                message,
                hostname=self.settings.host,
                port=self.settings.port,
                username=self.settings.username or None,
                password=self.settings.password or None,
                start_tls=self.settings.use_tls,
                timeout=self.settings.timeout,
            )
        except aiosmtplib.SMTPException:
            logger.error("Failed to send email via SMTP host %s", self.settings.host)
            raise


class LoggingTransport:
    """Used when mail delivery is disabled; records that a message would be sent."""

    async def send(self, message: EmailMessage) -> None:
        logger.info("Mail disabled, skipping message to %s: %s", message["To"], message["Subject"])


def build_transport(settings: MailSettings) -> EmailTransport:
    if settings.enabled:
        return SmtpTransport(settings)
    return LoggingTransport()
