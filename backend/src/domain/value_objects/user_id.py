"""
UserId Value Object
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    value: int  # users.id, serial primary key

    def __post_init__(self):
        # bool is an int subclass; reject it explicitly
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"UserId must be an integer, got {self.value!r}")
        if self.value <= 0:
            raise ValueError("UserId must be positive")

    def __str__(self) -> str:
        return str(self.value)
