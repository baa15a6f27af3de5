"""
Job Entity - A job posting that belongs to a company.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

VALID_JOB_TYPES = ("full-time", "part-time", "contract")


@dataclass
class Job:
    id: int
    company_id: int
    title: str
    description: str
    type: str
    created_at: datetime
    location: Optional[str] = None
    requirements: list = field(default_factory=list)
    is_remote: bool = False
    expires_at: Optional[datetime] = None

    def __post_init__(self):
        if self.type not in VALID_JOB_TYPES:
            raise ValueError(
                f"Invalid job type: {self.type}. Must be one of {VALID_JOB_TYPES}."
            )
