"""
MessageId Value Object - integer identity assigned by storage.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MessageId:
    value: int  # messages.id, assigned on insert

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"MessageId must be an integer, got {self.value!r}")
        if self.value <= 0:
            raise ValueError("MessageId must be positive")

    def __str__(self) -> str:
        return str(self.value)
