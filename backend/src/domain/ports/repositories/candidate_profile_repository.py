"""
Candidate Profile Repository Port - Read-only candidate profile lookups.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.candidate_profile import CandidateProfile


class CandidateProfileRepository(ABC):
    @abstractmethod
    async def get_by_id(self, profile_id: int) -> Optional[CandidateProfile]: ...
