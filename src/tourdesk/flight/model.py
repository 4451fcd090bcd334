from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Flight:
    """
    A scheduled flight offered by the company.

    Attributes:
        destination: Arrival city.
        departure: Departure date and time.
        airport: Departure airport.
        available_seats: Seats still for sale.
        id: Database primary key (None for new records).
    """

    destination: str
    departure: datetime
    airport: str
    available_seats: int
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"Flight #{self.id} {self.airport} -> {self.destination} at {self.departure:%Y-%m-%d %H:%M}"
