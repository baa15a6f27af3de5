"""
DomainValidationError - A business rule rejected the input.
Maps to: HTTP 422 Unprocessable Entity
"""


class DomainValidationError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
