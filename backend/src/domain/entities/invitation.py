"""
Invitation Entity - An employer inviting a candidate to apply for a job.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

VALID_INVITATION_STATUSES = ("pending", "accepted", "declined")


@dataclass
class Invitation:
    id: int
    job_id: int
    candidate_id: int  # candidate_profiles.id, not users.id
    created_at: datetime
    message: Optional[str] = None
    status: str = "pending"

    def __post_init__(self):
        if self.status not in VALID_INVITATION_STATUSES:
            raise ValueError(f"Invalid invitation status: {self.status}")
