"""
Job Repository Port - Read-only job lookups.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.job import Job


class JobRepository(ABC):
    @abstractmethod
    async def get_by_id(self, job_id: int) -> Optional[Job]: ...
