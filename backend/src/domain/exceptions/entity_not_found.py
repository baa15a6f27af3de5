"""
EntityNotFoundError - A job, candidate profile or other referenced record does not exist.
Maps to: HTTP 404 Not Found
"""


class EntityNotFoundError(Exception):
    """Raised when a referenced record is missing."""

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)
        self.message = message
