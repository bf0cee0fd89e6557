"""Feature modules and their public exports."""

from . import accounts, contacts, projects

__all__ = [
    "accounts",
    "contacts",
    "projects",
]
