"""
Repository contract and shared SQL plumbing.

Every repository implements the same five operations over one entity type.
Composite repositories (purchases, trips) resolve their foreign keys by
calling the repositories they were constructed with, never through joins.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Generic, Optional, TypeVar

import psycopg

from tourdesk.db import Database
from tourdesk.errors import ReferentialIntegrityError, StoreError, ValidationError
from tourdesk.logger import get_logger

logger = get_logger(__name__)

K = TypeVar("K")
E = TypeVar("E")
R = TypeVar("R")


class Repository(ABC, Generic[K, E]):
    """Uniform CRUD contract keyed by K over entities of type E."""

    @abstractmethod
    def find_one(self, entity_id: K) -> Optional[E]:
        """Return the entity with this id, or None when no row matches."""

    @abstractmethod
    def find_all(self) -> list[E]:
        """Return every entity, ordered by id."""

    @abstractmethod
    def save(self, entity: E) -> E:
        """Insert the entity and return it with its store-assigned id."""

    @abstractmethod
    def delete(self, entity_id: K) -> Optional[E]:
        """Remove the row and return the removed entity, or None."""

    @abstractmethod
    def update(self, entity_id: K, entity: E) -> Optional[E]:
        """Write the mutable fields and return the updated entity, or None."""


class SqlRepository(Repository[int, E]):
    """Base class for repositories backed by a single table."""

    entity_name: str = ""

    def __init__(self, db: Database):
        self.db = db

    @contextmanager
    def _store(self, operation: str, entity_id: Optional[int] = None):
        """Translate driver failures into StoreError with operation context."""
        try:
            yield
        except psycopg.Error as e:
            logger.error(
                "%s failed for %s %s: %s", operation, self.entity_name, entity_id, e
            )
            raise StoreError(operation, self.entity_name, entity_id) from e

    def _resolve(
        self,
        repository: Repository[int, R],
        reference: str,
        reference_id: int,
        entity_id: int,
    ) -> R:
        """Look up a referenced entity; a missing row is a referential failure."""
        found = repository.find_one(reference_id)
        if found is None:
            logger.warning(
                "%s %s references missing %s %s",
                self.entity_name,
                entity_id,
                reference,
                reference_id,
            )
            raise ReferentialIntegrityError(
                self.entity_name, entity_id, reference, reference_id
            )
        return found

    def _require_reference(self, value, reference: str) -> int:
        """Return the id of a referenced entity that must already be persisted."""
        if value is None:
            raise ValidationError(self.entity_name, f"{reference} is required")
        if value.id is None:
            raise ValidationError(self.entity_name, f"{reference} has not been saved")
        return value.id

    def _require_text(self, value: Optional[str], field: str) -> None:
        if value is None or not value.strip():
            raise ValidationError(self.entity_name, f"{field} must not be empty")
