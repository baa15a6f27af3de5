"""
AccessDeniedError - The caller may not act on this record (e.g. another company's job).
Maps to: HTTP 403 Forbidden
"""


class AccessDeniedError(Exception):
    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
        self.message = message
