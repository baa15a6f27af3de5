"""
CandidateProfile Entity - The public profile of a candidate user.
"""

from dataclasses import dataclass, field
from typing import Optional

from src.domain.value_objects.user_id import UserId


@dataclass
class CandidateProfile:
    id: int
    user_id: UserId
    first_name: str
    last_name: str
    headline: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    resume_url: Optional[str] = None
    profile_complete: bool = False
    education: list = field(default_factory=list)
    experience: list = field(default_factory=list)
    skills: list = field(default_factory=list)
