"""
UnauthenticatedError - Raised when a credential is missing, malformed, tampered or expired.
Maps to: HTTP 401 Unauthorized / WebSocket close code 1008
"""


class UnauthenticatedError(Exception):
    """Raised when a presented credential cannot be verified"""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
        self.message = message
