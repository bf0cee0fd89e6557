"""Project domain specific exceptions."""


class ProjectError(Exception):
    """Base class for portfolio project errors."""


class ProjectNotFoundError(ProjectError):
    """Raised when the project does not exist or is not publicly visible."""


class InvalidProjectImagesError(ProjectError):
    """Raised when more than one image is marked as primary."""
