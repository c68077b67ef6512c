"""Typed per-resource view of the origin.

A Repository[T] reads and writes one resource as a caller-supplied pydantic
schema T; RestRepository in src/infrastructure/rest/repositories.py backs it
with a DataProvider.

  - Every method is async and costs at least one origin round trip.
  - list() takes a ListQuery; resource-specific filters go in query.filter.
  - get() returns None only when the origin answers 404; any other failure
    (outage, refused access) propagates.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from src.domain.models.queries import ListQuery
from src.domain.models.records import ListResult, RecordId

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract CRUD interface for one resource."""

    @abstractmethod
    async def get(self, id: RecordId) -> T | None:
        """Return the entity with the given id, or None if not found."""

    @abstractmethod
    async def list(self, query: ListQuery | None = None) -> ListResult[T]:
        """Return a page of entities and the origin's total count."""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity and return it as the origin stored it."""

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Persist changes to an existing entity and return the updated version."""

    @abstractmethod
    async def delete(self, id: RecordId) -> None:
        """Remove the entity with the given id."""
