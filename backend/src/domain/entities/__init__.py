"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from src.domain.entities.message import Message
from src.domain.entities.invitation import Invitation
from src.domain.entities.job import Job
from src.domain.entities.company import Company
from src.domain.entities.candidate_profile import CandidateProfile

__all__ = [
    "Message",
    "Invitation",
    "Job",
    "Company",
    "CandidateProfile",
]
