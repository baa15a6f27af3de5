"""
Invitation Repository Port - Interface for invitation persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.invitation import Invitation


class InvitationRepository(ABC):
    @abstractmethod
    async def get_by_id(self, invitation_id: int) -> Optional[Invitation]: ...

    @abstractmethod
    async def create(
        self, job_id: int, candidate_id: int, message: Optional[str] = None
    ) -> Invitation: ...
