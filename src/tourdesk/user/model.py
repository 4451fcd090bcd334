from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class User:
    """An agency employee who sells purchases."""

    username: str
    password: str = field(repr=False)
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"User #{self.id} {self.username}"
