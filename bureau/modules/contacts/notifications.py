"""Plain-text notifications sent after a contact form submission."""

from __future__ import annotations

import asyncio
import logging
from email.message import EmailMessage
from typing import Optional

from bureau.core.config import MailSettings
from bureau.infrastructure.mail import EmailTransport

from .models import Contact

logger = logging.getLogger(__name__)

CONFIRMATION_SUBJECT = "Thank you for contacting Bureau Engine"


class ContactMailer:
    def __init__(self, transport: EmailTransport, settings: MailSettings) -> None:
        self._transport = transport
        self._settings = settings

    @property
    def sender(self) -> str:
        return f"{self._settings.from_name} <{self._settings.from_email}>"

    def notification_message(self, contact: Contact) -> Optional[EmailMessage]:
        recipient = self._settings.admin_email or self._settings.username
        if not recipient:
            return None

        lines = [
            "A new project inquiry was submitted through the website.",
            "",
            f"Name: {contact.name}",
            f"Email: {contact.email}",
            f"Company: {contact.company or 'Not specified'}",
            f"Project type: {contact.project_type or 'Not specified'}",
            f"Budget: {contact.budget or 'Not specified'}",
            f"Timeline: {contact.timeline or 'Not specified'}",
            "",
            contact.message,
            "",
            f"Reply directly to: {contact.email}",
        ]
        message = self._build(recipient, f"New Project Inquiry from {contact.name}", "\n".join(lines))
        message["Reply-To"] = contact.email
        return message

    def confirmation_message(self, email: str, name: str) -> EmailMessage:
        body = (
            f"Hi {name},\n\n"
            "Thank you for reaching out to Bureau Engine. We have received your message "
            "and will get back to you within 24 hours.\n\n"
            "Best regards,\n"
            "The Bureau Engine team"
        )
        return self._build(email, CONFIRMATION_SUBJECT, body)

    async def send_contact_notification(self, contact: Contact) -> None:
        message = self.notification_message(contact)
        if message is None:
            logger.warning("No admin mailbox configured; skipping notification for contact %s", contact.id)
            return
        await self._transport.send(message)

    async def send_contact_confirmation(self, email: str, name: str) -> None:
        await self._transport.send(self.confirmation_message(email, name))

    async def deliver_submission_emails(self, contact: Contact) -> None:
        """Send both messages; failures are logged and never reach the visitor."""
        results = await asyncio.gather(
            self.send_contact_notification(contact),
            self.send_contact_confirmation(contact.email, contact.name),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, Exception):
                logger.error("Email sending error for contact %s: %s", contact.id, result)

    def _build(self, recipient: str, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = recipient
        message["Subject"] = subject
        message.set_content(body)
        return message


__all__ = ["CONFIRMATION_SUBJECT", "ContactMailer"]
