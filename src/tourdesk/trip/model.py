from dataclasses import dataclass
from typing import Optional

from tourdesk.purchase.model import Purchase
from tourdesk.tourist.model import Tourist


@dataclass(frozen=True)
class Trip:
    """A tourist travelling on a purchased ticket."""

    tourist: Tourist
    purchase: Purchase
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"Trip #{self.id} {self.tourist.name} via purchase #{self.purchase.id}"
