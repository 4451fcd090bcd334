"""
Flight

This module provides the Flight entity and its repository.
"""

from tourdesk.flight.model import Flight
from tourdesk.flight.repository import FlightRepository

__all__ = ["Flight", "FlightRepository"]
