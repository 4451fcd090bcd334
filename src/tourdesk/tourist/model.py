from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Tourist:
    """A traveller named on purchases and trips."""

    name: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"Tourist #{self.id} {self.name}"
