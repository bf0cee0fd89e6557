"""Contact submission services and models."""

from .exceptions import ContactError, ContactNotFoundError, DuplicateSubmissionError
from .models import CONTACT_STATUSES, Contact, ContactPage, ContactStats, ContactSubmission
from .notifications import CONFIRMATION_SUBJECT, ContactMailer
from .service import ContactService

__all__ = [
    "CONFIRMATION_SUBJECT",
    "CONTACT_STATUSES",
    "Contact",
    "ContactError",
    "ContactMailer",
    "ContactNotFoundError",
    "ContactPage",
    "ContactService",
    "ContactStats",
    "ContactSubmission",
    "DuplicateSubmissionError",
]
