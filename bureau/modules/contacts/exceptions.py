"""Contact domain specific exceptions."""


class ContactError(Exception):
    """Base class for contact submission errors."""


class ContactNotFoundError(ContactError):
    """Raised when the requested contact submission does not exist."""


class DuplicateSubmissionError(ContactError):
    """Raised when the same email submitted the form within the duplicate window."""
