from dataclasses import replace
from typing import Optional

from tourdesk.db import Database
from tourdesk.flight.repository import FlightRepository
from tourdesk.logger import get_logger
from tourdesk.purchase.model import Purchase
from tourdesk.repository import SqlRepository
from tourdesk.tourist.repository import TouristRepository
from tourdesk.user.repository import UserRepository

logger = get_logger(__name__)

COLUMNS = "id, flight_id, user_id, tourist_id, client_address"


class PurchaseRepository(SqlRepository[Purchase]):
    """
    Repository for purchases.

    Reads the purchase row, then materializes its flight, user and tourist
    through the injected repositories. A reference that cannot be resolved
    raises ReferentialIntegrityError instead of producing a partial Purchase.
    Writes only ever touch the purchase table.
    """

    entity_name = "Purchase"

    def __init__(
        self,
        db: Database,
        flight_repository: FlightRepository,
        user_repository: UserRepository,
        tourist_repository: TouristRepository,
    ):
        super().__init__(db)
        self.flight_repository = flight_repository
        self.user_repository = user_repository
        self.tourist_repository = tourist_repository

    def find_one(self, purchase_id: int) -> Optional[Purchase]:
        """Get purchase by ID with all references resolved."""
        logger.debug("Finding Purchase by id %s", purchase_id)
        with self._store("find_one", purchase_id):
            row = self.db.fetch_one(
                f"SELECT {COLUMNS} FROM purchase WHERE id = %s",
                (purchase_id,),
            )
        if row is None:
            logger.debug("Purchase not found with id %s", purchase_id)
            return None
        return self._row_to_purchase(row)

    def find_all(self) -> list[Purchase]:
        """List all purchases. Issues three lookups per row."""
        with self._store("find_all"):
            rows = self.db.fetch_all(f"SELECT {COLUMNS} FROM purchase ORDER BY id")
        purchases = [self._row_to_purchase(r) for r in rows]
        logger.debug("Found %d Purchases", len(purchases))
        return purchases

    def find_by_tourist(self, tourist_id: int) -> list[Purchase]:
        """List the purchases made for a tourist."""
        with self._store("find_by_tourist"):
            rows = self.db.fetch_all(
                f"SELECT {COLUMNS} FROM purchase WHERE tourist_id = %s ORDER BY id",
                (tourist_id,),
            )
        return [self._row_to_purchase(r) for r in rows]

    def save(self, purchase: Purchase) -> Purchase:
        """Insert a purchase row pointing at already persisted entities."""
        flight_id = self._require_reference(purchase.flight, "flight")
        user_id = self._require_reference(purchase.user, "user")
        tourist_id = self._require_reference(purchase.tourist, "tourist")
        self._require_text(purchase.client_address, "client_address")

        with self._store("save"):
            row = self.db.fetch_one(
                """
                INSERT INTO purchase (flight_id, user_id, tourist_id, client_address)
                VALUES (%s, %s, %s, %s)
                RETURNING id
                """,
                (flight_id, user_id, tourist_id, purchase.client_address),
            )
        saved = replace(purchase, id=row["id"])
        logger.debug("Saved %s", saved)
        return saved

    def delete(self, purchase_id: int) -> Optional[Purchase]:
        """
        Delete a purchase and return the removed row, resolved.

        The row is always removed when present. If one of its references
        is already gone, ReferentialIntegrityError is raised after the
        delete. Trips referencing the purchase are left untouched.
        """
        with self._store("delete", purchase_id):
            row = self.db.fetch_one(
                f"DELETE FROM purchase WHERE id = %s RETURNING {COLUMNS}",
                (purchase_id,),
            )
        logger.debug("Deleted Purchase %s: %s", purchase_id, row is not None)
        return self._row_to_purchase(row) if row else None

    def update(self, purchase_id: int, purchase: Purchase) -> Optional[Purchase]:
        """
        Change the client address of a purchase.

        The current purchase is resolved before writing, so a dangling
        reference raises ReferentialIntegrityError and leaves the row as is.
        """
        self._require_text(purchase.client_address, "client_address")
        current = self.find_one(purchase_id)
        if current is None:
            return None
        with self._store("update", purchase_id):
            row = self.db.fetch_one(
                "UPDATE purchase SET client_address = %s WHERE id = %s RETURNING id",
                (purchase.client_address, purchase_id),
            )
        if row is None:
            logger.debug("Purchase %s removed before update", purchase_id)
            return None
        return replace(current, client_address=purchase.client_address)

    def _row_to_purchase(self, row: dict) -> Purchase:
        purchase_id = row["id"]
        flight = self._resolve(self.flight_repository, "Flight", row["flight_id"], purchase_id)
        user = self._resolve(self.user_repository, "User", row["user_id"], purchase_id)
        tourist = self._resolve(self.tourist_repository, "Tourist", row["tourist_id"], purchase_id)
        return Purchase(
            id=purchase_id,
            flight=flight,
            user=user,
            tourist=tourist,
            client_address=row["client_address"],
        )
