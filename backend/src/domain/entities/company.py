"""
Company Entity - An employer's company profile (read-only to the messaging core).
"""

from dataclasses import dataclass
from typing import Optional

from src.domain.value_objects.user_id import UserId


@dataclass
class Company:
    id: int
    owner_id: UserId
    name: str
    description: Optional[str] = None
    industry: Optional[str] = None
    location: Optional[str] = None
    logo_url: Optional[str] = None
    website: Optional[str] = None

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.owner_id == user_id
