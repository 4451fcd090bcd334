"""
Trip

This module provides the Trip entity and its repository. Resolving a trip
resolves its purchase, which in turn resolves the purchase's flight, user
and tourist.
"""

from tourdesk.trip.model import Trip
from tourdesk.trip.repository import TripRepository

__all__ = ["Trip", "TripRepository"]
