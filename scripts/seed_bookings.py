"""Seed a small set of flights, users and bookings into the database."""
from datetime import datetime

from tourdesk.config import Config
from tourdesk.db import Database
from tourdesk.flight import Flight
from tourdesk.purchase import Purchase
from tourdesk.repositories import build_repositories
from tourdesk.tourist import Tourist
from tourdesk.trip import Trip
from tourdesk.user import User

INITIAL_FLIGHTS = [
    {"destination": "Paris", "departure": datetime(2024, 6, 1, 9, 30), "airport": "Cluj-Napoca", "available_seats": 120},
    {"destination": "Rome", "departure": datetime(2024, 6, 3, 14, 0), "airport": "Bucharest Otopeni", "available_seats": 90},
    {"destination": "London", "departure": datetime(2024, 6, 5, 7, 15), "airport": "Iasi", "available_seats": 150},
]

INITIAL_USERS = [
    {"username": "agent", "password": "changeme"},
]


def main():
    repos = build_repositories(Database(Config.from_env()))

    flights = [repos.flights.save(Flight(**f)) for f in INITIAL_FLIGHTS]
    for flight in flights:
        print(f"Created: {flight}")

    users = []
    for user in INITIAL_USERS:
        existing = repos.users.find_by_username(user["username"])
        if existing:
            print(f"Skipping {user['username']} - already exists")
            users.append(existing)
            continue
        users.append(repos.users.save(User(**user)))
        print(f"Created: {users[-1]}")

    tourist = repos.tourists.save(Tourist(name="Ana"))
    purchase = repos.purchases.save(
        Purchase(flight=flights[0], user=users[0], tourist=tourist, client_address="Cluj")
    )
    trip = repos.trips.save(Trip(tourist=tourist, purchase=purchase))
    print(f"Created: {trip}")


if __name__ == "__main__":
    main()
