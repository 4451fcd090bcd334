from dataclasses import replace
from typing import Optional

from tourdesk.db import Database
from tourdesk.logger import get_logger
from tourdesk.purchase.repository import PurchaseRepository
from tourdesk.repository import SqlRepository
from tourdesk.tourist.repository import TouristRepository
from tourdesk.trip.model import Trip

logger = get_logger(__name__)

COLUMNS = "id, tourist_id, purchase_id"


class TripRepository(SqlRepository[Trip]):
    """
    Repository for trips.

    A trip's purchase is resolved through PurchaseRepository, so a missing
    row at any depth (the purchase itself, or its flight, user or tourist)
    surfaces as ReferentialIntegrityError.
    """

    entity_name = "Trip"

    def __init__(
        self,
        db: Database,
        tourist_repository: TouristRepository,
        purchase_repository: PurchaseRepository,
    ):
        super().__init__(db)
        self.tourist_repository = tourist_repository
        self.purchase_repository = purchase_repository

    def find_one(self, trip_id: int) -> Optional[Trip]:
        """Get trip by ID with its tourist and purchase resolved."""
        logger.debug("Finding Trip by id %s", trip_id)
        with self._store("find_one", trip_id):
            row = self.db.fetch_one(
                f"SELECT {COLUMNS} FROM trip WHERE id = %s",
                (trip_id,),
            )
        if row is None:
            logger.debug("Trip not found with id %s", trip_id)
            return None
        return self._row_to_trip(row)

    def find_all(self) -> list[Trip]:
        """List all trips."""
        with self._store("find_all"):
            rows = self.db.fetch_all(f"SELECT {COLUMNS} FROM trip ORDER BY id")
        trips = [self._row_to_trip(r) for r in rows]
        logger.debug("Found %d Trips", len(trips))
        return trips

    def save(self, trip: Trip) -> Trip:
        """Insert a trip row pointing at a persisted tourist and purchase."""
        tourist_id = self._require_reference(trip.tourist, "tourist")
        purchase_id = self._require_reference(trip.purchase, "purchase")

        with self._store("save"):
            row = self.db.fetch_one(
                "INSERT INTO trip (tourist_id, purchase_id) VALUES (%s, %s) RETURNING id",
                (tourist_id, purchase_id),
            )
        saved = replace(trip, id=row["id"])
        logger.debug("Saved %s", saved)
        return saved

    def delete(self, trip_id: int) -> Optional[Trip]:
        """
        Delete a trip and return the removed row, resolved.

        A trip with a dangling reference is still removed; the
        ReferentialIntegrityError comes after the delete.
        """
        with self._store("delete", trip_id):
            row = self.db.fetch_one(
                f"DELETE FROM trip WHERE id = %s RETURNING {COLUMNS}",
                (trip_id,),
            )
        logger.debug("Deleted Trip %s: %s", trip_id, row is not None)
        return self._row_to_trip(row) if row else None

    def update(self, trip_id: int, trip: Trip) -> Optional[Trip]:
        """
        Reassign the trip to another tourist. The purchase never changes.

        The new tourist and the current purchase are resolved before the
        write; if either is missing nothing is changed.
        """
        tourist_id = self._require_reference(trip.tourist, "tourist")
        with self._store("update", trip_id):
            row = self.db.fetch_one(
                f"SELECT {COLUMNS} FROM trip WHERE id = %s",
                (trip_id,),
            )
        if row is None:
            logger.debug("Trip not found with id %s", trip_id)
            return None
        tourist = self._resolve(self.tourist_repository, "Tourist", tourist_id, trip_id)
        purchase = self._resolve(self.purchase_repository, "Purchase", row["purchase_id"], trip_id)

        with self._store("update", trip_id):
            updated = self.db.fetch_one(
                "UPDATE trip SET tourist_id = %s WHERE id = %s RETURNING id",
                (tourist_id, trip_id),
            )
        if updated is None:
            logger.debug("Trip %s removed before update", trip_id)
            return None
        return Trip(id=trip_id, tourist=tourist, purchase=purchase)

    def _row_to_trip(self, row: dict) -> Trip:
        trip_id = row["id"]
        tourist = self._resolve(self.tourist_repository, "Tourist", row["tourist_id"], trip_id)
        purchase = self._resolve(self.purchase_repository, "Purchase", row["purchase_id"], trip_id)
        return Trip(id=trip_id, tourist=tourist, purchase=purchase)
