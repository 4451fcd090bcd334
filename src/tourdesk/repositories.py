"""
Repositories: Data Access Layer

Each repository encapsulates all data access logic for one entity and maps
rows to frozen dataclasses. Composite repositories receive the repositories
they depend on through their constructor, so the graph is assembled once
here and can be shared by every caller (or replaced by mocks in tests).

    TouristRepository, FlightRepository, UserRepository   (leaf)
    PurchaseRepository -> Flight, User, Tourist
    TripRepository     -> Tourist, Purchase
"""

from dataclasses import dataclass

from tourdesk.db import Database
from tourdesk.flight import FlightRepository
from tourdesk.purchase import PurchaseRepository
from tourdesk.tourist import TouristRepository
from tourdesk.trip import TripRepository
from tourdesk.user import UserRepository


@dataclass(frozen=True)
class Repositories:
    tourists: TouristRepository
    flights: FlightRepository
    users: UserRepository
    purchases: PurchaseRepository
    trips: TripRepository


def build_repositories(db: Database) -> Repositories:
    """Wire every repository against one Database."""
    tourists = TouristRepository(db)
    flights = FlightRepository(db)
    users = UserRepository(db)
    purchases = PurchaseRepository(db, flights, users, tourists)
    trips = TripRepository(db, tourists, purchases)
    return Repositories(
        tourists=tourists,
        flights=flights,
        users=users,
        purchases=purchases,
        trips=trips,
    )
