"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (Prisma, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from src.domain.ports.repositories.message_repository import MessageRepository
from src.domain.ports.repositories.invitation_repository import InvitationRepository
from src.domain.ports.repositories.job_repository import JobRepository
from src.domain.ports.repositories.company_repository import CompanyRepository
from src.domain.ports.repositories.candidate_profile_repository import (
    CandidateProfileRepository,
)

__all__ = [
    "MessageRepository",
    "InvitationRepository",
    "JobRepository",
    "CompanyRepository",
    "CandidateProfileRepository",
]
