"""
AuthIdentity Value Object - who a verified credential belongs to.
"""

from dataclasses import dataclass

from src.domain.value_objects.user_email import UserEmail
from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.user_role import UserRole


@dataclass(frozen=True)
class AuthIdentity:
    id: UserId
    email: UserEmail
    role: UserRole

    @property
    def is_employer(self) -> bool:
        return self.role is UserRole.EMPLOYER

    @property
    def is_candidate(self) -> bool:
        return self.role is UserRole.CANDIDATE
