"""
Integration tests for the full repository graph against PostgreSQL.

Run with: TOURDESK_ENV=test pytest src/tourdesk/scenario_test.py -v
"""

from datetime import date, datetime

import pytest

from tourdesk.errors import ReferentialIntegrityError
from tourdesk.flight import Flight
from tourdesk.purchase import Purchase
from tourdesk.tourist import Tourist
from tourdesk.trip import Trip


@pytest.fixture
def saved_purchase(repos, saved_flight, saved_user, saved_tourist) -> Purchase:
    return repos.purchases.save(
        Purchase(
            flight=saved_flight,
            user=saved_user,
            tourist=saved_tourist,
            client_address="Cluj",
        )
    )


class TestBookingScenario:
    def test_trip_resolves_nested_purchase_and_tourist(self, repos, saved_purchase, saved_tourist):
        trip = repos.trips.save(Trip(tourist=saved_tourist, purchase=saved_purchase))

        found = repos.trips.find_one(trip.id)

        assert found == trip
        assert found.purchase.client_address == "Cluj"
        assert found.tourist.name == "Ana"
        assert found.purchase.flight.destination == "Paris"

    def test_missing_purchase_is_absent(self, repos):
        assert repos.purchases.find_one(100) is None


class TestNotFound:
    @pytest.mark.parametrize("name", ["tourists", "flights", "users", "purchases", "trips"])
    def test_find_one_unknown_id(self, repos, name):
        assert getattr(repos, name).find_one(99999) is None

    @pytest.mark.parametrize("name", ["tourists", "flights", "users", "purchases", "trips"])
    def test_find_all_empty_table(self, repos, name):
        assert getattr(repos, name).find_all() == []


class TestRoundTrip:
    def test_save_then_find(self, repos, saved_tourist, saved_flight, saved_user, saved_purchase):
        assert repos.tourists.find_one(saved_tourist.id) == saved_tourist
        assert repos.flights.find_one(saved_flight.id) == saved_flight
        assert repos.users.find_one(saved_user.id) == saved_user
        assert repos.purchases.find_one(saved_purchase.id) == saved_purchase

    def test_find_all_counts_saves(self, repos):
        for name in ["Ana", "Mihai", "Ioana"]:
            repos.tourists.save(Tourist(name=name))

        assert [t.name for t in repos.tourists.find_all()] == ["Ana", "Mihai", "Ioana"]

    def test_identity_assigned_by_store(self, repos):
        first = repos.tourists.save(Tourist(name="Ana"))
        second = repos.tourists.save(Tourist(name="Ana"))

        assert first.id is not None
        assert first.id != second.id


class TestDanglingReferences:
    def test_deleted_tourist_breaks_purchase(self, repos, saved_purchase, saved_tourist):
        repos.tourists.delete(saved_tourist.id)

        with pytest.raises(ReferentialIntegrityError) as exc_info:
            repos.purchases.find_one(saved_purchase.id)

        assert exc_info.value.reference == "Tourist"
        assert exc_info.value.reference_id == saved_tourist.id

    def test_deleted_flight_breaks_trip(self, repos, saved_purchase, saved_tourist, saved_flight):
        trip = repos.trips.save(Trip(tourist=saved_tourist, purchase=saved_purchase))
        repos.flights.delete(saved_flight.id)

        with pytest.raises(ReferentialIntegrityError) as exc_info:
            repos.trips.find_one(trip.id)

        assert exc_info.value.entity == "Purchase"
        assert exc_info.value.reference == "Flight"

    def test_dangling_purchase_can_still_be_deleted(self, repos, database, saved_purchase, saved_tourist):
        repos.tourists.delete(saved_tourist.id)

        with pytest.raises(ReferentialIntegrityError):
            repos.purchases.delete(saved_purchase.id)

        assert database.fetch_one("SELECT id FROM purchase WHERE id = %s", (saved_purchase.id,)) is None

    def test_dangling_purchase_update_leaves_row(self, repos, database, saved_purchase, saved_tourist):
        repos.tourists.delete(saved_tourist.id)

        with pytest.raises(ReferentialIntegrityError):
            repos.purchases.update(
                saved_purchase.id,
                Purchase(
                    flight=saved_purchase.flight,
                    user=saved_purchase.user,
                    tourist=saved_tourist,
                    client_address="Brasov",
                ),
            )

        row = database.fetch_one("SELECT client_address FROM purchase WHERE id = %s", (saved_purchase.id,))
        assert row["client_address"] == "Cluj"

    def test_trip_reassigned_to_missing_tourist_is_unchanged(self, repos, database, saved_purchase, saved_tourist):
        trip = repos.trips.save(Trip(tourist=saved_tourist, purchase=saved_purchase))

        with pytest.raises(ReferentialIntegrityError):
            repos.trips.update(trip.id, Trip(tourist=Tourist(id=99999, name="Ghost"), purchase=saved_purchase))

        row = database.fetch_one("SELECT tourist_id FROM trip WHERE id = %s", (trip.id,))
        assert row["tourist_id"] == saved_tourist.id

    def test_delete_does_not_cascade(self, repos, saved_purchase, saved_user):
        removed = repos.purchases.delete(saved_purchase.id)

        assert removed == saved_purchase
        assert repos.purchases.find_one(saved_purchase.id) is None
        assert repos.users.find_one(saved_user.id) == saved_user


class TestUpdate:
    def test_update_missing_id_changes_nothing(self, repos, saved_tourist):
        assert repos.tourists.update(99999, Tourist(name="Ghost")) is None
        assert repos.tourists.find_all() == [saved_tourist]

    def test_update_purchase_address(self, repos, saved_purchase):
        updated = repos.purchases.update(
            saved_purchase.id,
            Purchase(
                flight=saved_purchase.flight,
                user=saved_purchase.user,
                tourist=saved_purchase.tourist,
                client_address="Brasov",
            ),
        )

        assert updated.client_address == "Brasov"
        assert repos.purchases.find_one(saved_purchase.id).client_address == "Brasov"

    def test_update_flight_seats(self, repos, saved_flight):
        updated = repos.flights.update(
            saved_flight.id,
            Flight(
                destination=saved_flight.destination,
                departure=saved_flight.departure,
                airport=saved_flight.airport,
                available_seats=saved_flight.available_seats - 1,
            ),
        )

        assert updated.available_seats == 119


class TestQueries:
    def test_find_flights_by_destination(self, repos, saved_flight):
        repos.flights.save(
            Flight(
                destination="Paris",
                departure=datetime(2024, 6, 2, 9, 30),
                airport="Cluj-Napoca",
                available_seats=80,
            )
        )

        assert repos.flights.find_by_destination("Paris", date(2024, 6, 1)) == [saved_flight]

    def test_find_user_by_username(self, repos, saved_user):
        assert repos.users.find_by_username("agent") == saved_user
        assert repos.users.find_by_username("nobody") is None

    def test_find_purchases_by_tourist(self, repos, saved_purchase, saved_tourist):
        other = repos.tourists.save(Tourist(name="Mihai"))

        assert repos.purchases.find_by_tourist(saved_tourist.id) == [saved_purchase]
        assert repos.purchases.find_by_tourist(other.id) == []
