"""
UserEmail Value Object - the email claim carried by a credential.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserEmail:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or "@" not in self.value.strip():
            raise ValueError(f"Invalid user email: {self.value!r}")
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value
