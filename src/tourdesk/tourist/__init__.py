"""
Tourist

This module provides the Tourist entity and its repository.
"""

from tourdesk.tourist.model import Tourist
from tourdesk.tourist.repository import TouristRepository

__all__ = ["Tourist", "TouristRepository"]
