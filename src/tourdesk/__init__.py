"""Data-access layer for a flight company's bookings."""

__version__ = "0.1.0"
