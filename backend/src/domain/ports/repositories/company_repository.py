"""
Company Repository Port - Read-only company lookups.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.company import Company


class CompanyRepository(ABC):
    @abstractmethod
    async def get_by_id(self, company_id: int) -> Optional[Company]: ...
