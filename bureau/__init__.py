"""Bureau Engine API: contact intake, portfolio projects and admin accounts."""

__version__ = "1.0.0"
