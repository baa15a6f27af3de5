"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.user_email import UserEmail
from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.user_role import UserRole
from src.domain.value_objects.auth_identity import AuthIdentity

__all__ = [
    "UserId",
    "UserEmail",
    "MessageId",
    "UserRole",
    "AuthIdentity",
]
