from datetime import date
from typing import Optional

from tourdesk.errors import ValidationError
from tourdesk.flight.model import Flight
from tourdesk.logger import get_logger
from tourdesk.repository import SqlRepository

logger = get_logger(__name__)

COLUMNS = "id, destination, departure, airport, available_seats"


class FlightRepository(SqlRepository[Flight]):
    """
    Repository for flight data access.
    Encapsulates all SQL and queries for the flight table.
    """

    entity_name = "Flight"

    def find_one(self, flight_id: int) -> Optional[Flight]:
        """Get flight by ID."""
        logger.debug("Finding Flight by id %s", flight_id)
        with self._store("find_one", flight_id):
            row = self.db.fetch_one(
                f"SELECT {COLUMNS} FROM flight WHERE id = %s",
                (flight_id,),
            )
        if row is None:
            logger.debug("Flight not found with id %s", flight_id)
            return None
        return self._row_to_flight(row)

    def find_all(self) -> list[Flight]:
        """List all flights."""
        with self._store("find_all"):
            rows = self.db.fetch_all(f"SELECT {COLUMNS} FROM flight ORDER BY id")
        logger.debug("Found %d Flights", len(rows))
        return [self._row_to_flight(r) for r in rows]

    def find_by_destination(self, destination: str, day: date) -> list[Flight]:
        """Flights to a destination departing on the given day, earliest first."""
        with self._store("find_by_destination"):
            rows = self.db.fetch_all(
                f"""
                SELECT {COLUMNS} FROM flight
                WHERE destination = %s AND departure::date = %s
                ORDER BY departure, id
                """,
                (destination, day),
            )
        return [self._row_to_flight(r) for r in rows]

    def save(self, flight: Flight) -> Flight:
        """Create a new flight."""
        self._validate(flight)
        with self._store("save"):
            row = self.db.fetch_one(
                f"""
                INSERT INTO flight (destination, departure, airport, available_seats)
                VALUES (%s, %s, %s, %s)
                RETURNING {COLUMNS}
                """,
                (flight.destination, flight.departure, flight.airport, flight.available_seats),
            )
        saved = self._row_to_flight(row)
        logger.debug("Saved %s", saved)
        return saved

    def delete(self, flight_id: int) -> Optional[Flight]:
        """Delete a flight. Purchases referencing it are left untouched."""
        with self._store("delete", flight_id):
            row = self.db.fetch_one(
                f"DELETE FROM flight WHERE id = %s RETURNING {COLUMNS}",
                (flight_id,),
            )
        logger.debug("Deleted Flight %s: %s", flight_id, row is not None)
        return self._row_to_flight(row) if row else None

    def update(self, flight_id: int, flight: Flight) -> Optional[Flight]:
        """Update the number of available seats; the schedule itself is fixed."""
        self._validate_seats(flight.available_seats)
        with self._store("update", flight_id):
            row = self.db.fetch_one(
                f"UPDATE flight SET available_seats = %s WHERE id = %s RETURNING {COLUMNS}",
                (flight.available_seats, flight_id),
            )
        logger.debug("Updated Flight %s: %s", flight_id, row is not None)
        return self._row_to_flight(row) if row else None

    def _validate(self, flight: Flight) -> None:
        self._require_text(flight.destination, "destination")
        self._require_text(flight.airport, "airport")
        if flight.departure is None:
            raise ValidationError(self.entity_name, "departure is required")
        self._validate_seats(flight.available_seats)

    def _validate_seats(self, seats: Optional[int]) -> None:
        if seats is None or seats < 0:
            raise ValidationError(self.entity_name, "available_seats must be a non-negative integer")

    @staticmethod
    def _row_to_flight(row: dict) -> Flight:
        return Flight(
            id=row["id"],
            destination=row["destination"],
            departure=row["departure"],
            airport=row["airport"],
            available_seats=row["available_seats"],
        )
