"""
StorageFailureError - Raised when the durable store rejects a write or read.
"""


class StorageFailureError(Exception):
    """Exception raised when a persistence call fails."""

    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(message)
        self.message = message
