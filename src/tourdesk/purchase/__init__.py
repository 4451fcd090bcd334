"""
Purchase

This module provides the Purchase entity and its repository, which resolves
a purchase's flight, user and tourist through their own repositories.
"""

from tourdesk.purchase.model import Purchase
from tourdesk.purchase.repository import PurchaseRepository

__all__ = ["Purchase", "PurchaseRepository"]
