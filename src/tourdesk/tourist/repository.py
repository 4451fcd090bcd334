from typing import Optional

from tourdesk.logger import get_logger
from tourdesk.repository import SqlRepository
from tourdesk.tourist.model import Tourist

logger = get_logger(__name__)


class TouristRepository(SqlRepository[Tourist]):
    """
    Repository for tourist data access.
    Encapsulates all SQL and queries for the tourist table.
    """

    entity_name = "Tourist"

    def find_one(self, tourist_id: int) -> Optional[Tourist]:
        """Get tourist by ID."""
        logger.debug("Finding Tourist by id %s", tourist_id)
        with self._store("find_one", tourist_id):
            row = self.db.fetch_one(
                "SELECT id, name FROM tourist WHERE id = %s",
                (tourist_id,),
            )
        if row is None:
            logger.debug("Tourist not found with id %s", tourist_id)
            return None
        return self._row_to_tourist(row)

    def find_all(self) -> list[Tourist]:
        """List all tourists."""
        with self._store("find_all"):
            rows = self.db.fetch_all("SELECT id, name FROM tourist ORDER BY id")
        logger.debug("Found %d Tourists", len(rows))
        return [self._row_to_tourist(r) for r in rows]

    def save(self, tourist: Tourist) -> Tourist:
        """Create a new tourist."""
        self._require_text(tourist.name, "name")
        with self._store("save"):
            row = self.db.fetch_one(
                "INSERT INTO tourist (name) VALUES (%s) RETURNING id, name",
                (tourist.name,),
            )
        saved = self._row_to_tourist(row)
        logger.debug("Saved %s", saved)
        return saved

    def delete(self, tourist_id: int) -> Optional[Tourist]:
        """Delete a tourist. Purchases and trips referencing it are left untouched."""
        with self._store("delete", tourist_id):
            row = self.db.fetch_one(
                "DELETE FROM tourist WHERE id = %s RETURNING id, name",
                (tourist_id,),
            )
        logger.debug("Deleted Tourist %s: %s", tourist_id, row is not None)
        return self._row_to_tourist(row) if row else None

    def update(self, tourist_id: int, tourist: Tourist) -> Optional[Tourist]:
        """Rename a tourist."""
        self._require_text(tourist.name, "name")
        with self._store("update", tourist_id):
            row = self.db.fetch_one(
                "UPDATE tourist SET name = %s WHERE id = %s RETURNING id, name",
                (tourist.name, tourist_id),
            )
        logger.debug("Updated Tourist %s: %s", tourist_id, row is not None)
        return self._row_to_tourist(row) if row else None

    @staticmethod
    def _row_to_tourist(row: dict) -> Tourist:
        return Tourist(id=row["id"], name=row["name"])
