#!/usr/bin/env python3
"""Tourdesk CLI for inspecting bookings."""

import argparse
import sys
from pathlib import Path

import psycopg
import questionary
from rich.console import Console
from rich.table import Table

from tourdesk.config import Config
from tourdesk.db import Database
from tourdesk.errors import TourdeskError
from tourdesk.logger import configure_logging
from tourdesk.repositories import Repositories, build_repositories

console = Console()

SCHEMA_FILE = Path(__file__).parent / "schema.sql"

# entity -> (repository attribute, columns, row renderer)
LISTINGS = {
    "tourists": ("tourists", ["id", "name"], lambda t: [t.id, t.name]),
    "flights": (
        "flights",
        ["id", "destination", "departure", "airport", "seats"],
        lambda f: [f.id, f.destination, f"{f.departure:%Y-%m-%d %H:%M}", f.airport, f.available_seats],
    ),
    "users": ("users", ["id", "username"], lambda u: [u.id, u.username]),
    "purchases": (
        "purchases",
        ["id", "tourist", "flight", "sold by", "address"],
        lambda p: [p.id, p.tourist.name, p.flight.destination, p.user.username, p.client_address],
    ),
    "trips": (
        "trips",
        ["id", "tourist", "purchase", "destination"],
        lambda t: [t.id, t.tourist.name, t.purchase.id, t.purchase.flight.destination],
    ),
}


def init_db(db: Database) -> None:
    """Create the tables if they do not exist yet."""
    if not questionary.confirm(f"Apply schema to {db.config.environment} database?").ask():
        console.print("[dim]Cancelled.[/]")
        return
    db.execute_script(SCHEMA_FILE.read_text())
    console.print("[green]Schema applied.[/]")


def list_entities(repos: Repositories, entity: str) -> None:
    """Print every row of an entity as a table, references resolved."""
    attribute, columns, render = LISTINGS[entity]
    records = getattr(repos, attribute).find_all()
    if not records:
        console.print(f"[red]No {entity} found.[/]")
        return

    table = Table(title=entity.capitalize())
    for column in columns:
        table.add_column(column)
    for record in records:
        table.add_row(*[str(value) for value in render(record)])
    console.print(table)


def show_trip(repos: Repositories) -> None:
    """Prompt the user to select a trip and print it fully resolved."""
    trips = repos.trips.find_all()
    if not trips:
        console.print("[red]No trips found.[/]")
        return
    trip = questionary.select(
        "Select a trip:",
        choices=[questionary.Choice(title=str(t), value=t) for t in trips],
    ).ask()
    if trip is None:
        return

    purchase = trip.purchase
    console.print(f"\n[bold green]Trip #{trip.id}[/] for [bold]{trip.tourist.name}[/]")
    console.print(f"  Flight:   {purchase.flight}")
    console.print(f"  Sold by:  {purchase.user.username}")
    console.print(f"  Ticket:   {purchase.tourist.name}, {purchase.client_address}")


def main():
    parser = argparse.ArgumentParser(description="Tourdesk CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create the database tables")
    list_parser = subparsers.add_parser("list", help="List stored entities")
    list_parser.add_argument("entity", choices=sorted(LISTINGS))
    subparsers.add_parser("show-trip", help="Inspect a trip and everything it references")

    args = parser.parse_args()

    config = Config.from_env()
    configure_logging(config.log_level)
    db = Database(config)
    repos = build_repositories(db)

    try:
        if args.command == "init-db":
            init_db(db)
        elif args.command == "list":
            list_entities(repos, args.entity)
        elif args.command == "show-trip":
            show_trip(repos)
    except (TourdeskError, psycopg.Error) as e:
        console.print(f"[red]{e}[/]")
        sys.exit(1)


if __name__ == "__main__":
    main()
