"""Exceptions raised by the tourdesk data-access layer."""

from typing import Optional


class TourdeskError(Exception):
    """Base class for every error raised by tourdesk."""


class ValidationError(TourdeskError):
    """Raised when an entity is rejected before any statement reaches the store."""

    def __init__(self, entity: str, message: str):
        self.entity = entity
        self.message = message
        super().__init__(f"Invalid {entity}: {message}")


class ReferentialIntegrityError(TourdeskError):
    """Raised when a composite entity references a row that no longer exists."""

    def __init__(
        self,
        entity: str,
        entity_id: Optional[int],
        reference: str,
        reference_id: Optional[int],
        message: str = None,
    ):
        self.entity = entity
        self.entity_id = entity_id
        self.reference = reference
        self.reference_id = reference_id
        self.message = message or (
            f"{entity} {entity_id} references missing {reference} {reference_id}"
        )
        super().__init__(self.message)


class StoreError(TourdeskError):
    """Raised when the database connection or a statement fails."""

    def __init__(
        self,
        operation: str,
        entity: str,
        entity_id: Optional[int] = None,
        message: str = None,
    ):
        self.operation = operation
        self.entity = entity
        self.entity_id = entity_id
        target = entity if entity_id is None else f"{entity} {entity_id}"
        self.message = message or f"{operation} failed for {target}"
        super().__init__(self.message)
