from dataclasses import dataclass
from typing import Optional

from tourdesk.flight.model import Flight
from tourdesk.tourist.model import Tourist
from tourdesk.user.model import User


@dataclass(frozen=True)
class Purchase:
    """
    A ticket sold by a user to a tourist on a flight.

    Attributes:
        flight: The flight the ticket is for.
        user: The employee who made the sale.
        tourist: The traveller.
        client_address: Billing address of the client.
        id: Database primary key (None for new records).
    """

    flight: Flight
    user: User
    tourist: Tourist
    client_address: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"Purchase #{self.id} {self.tourist.name} on flight #{self.flight.id} ({self.client_address})"
