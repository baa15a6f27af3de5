"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by
the presentation layer, which maps them to HTTP status codes or socket frames.
"""

from src.domain.exceptions.entity_not_found import EntityNotFoundError
from src.domain.exceptions.access_denied import AccessDeniedError
from src.domain.exceptions.validation_error import DomainValidationError
from src.domain.exceptions.unauthenticated import UnauthenticatedError
from src.domain.exceptions.malformed_payload import MalformedPayloadError
from src.domain.exceptions.storage_failure import StorageFailureError

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "UnauthenticatedError",
    "MalformedPayloadError",
    "StorageFailureError",
]
