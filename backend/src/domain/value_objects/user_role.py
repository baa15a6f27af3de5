"""
UserRole Value Object - the two kinds of job-board accounts.
"""

from enum import Enum


class UserRole(str, Enum):
    CANDIDATE = "candidate"
    EMPLOYER = "employer"

    def __str__(self) -> str:
        return self.value
