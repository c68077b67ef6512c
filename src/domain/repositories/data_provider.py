"""Resource-agnostic CRUD adapter interface.

Every operation takes the resource path (e.g. "patients") as its first
argument and works on plain Records.  Operations are independent and keep
no state between calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from src.domain.models.enums import BatchPolicy
from src.domain.models.queries import ListQuery
from src.domain.models.records import DeleteManyResult, ListResult, Record, RecordId


class DataProvider(ABC):
    """CRUD operations against an origin.

    Failures surface as ApiError subclasses (see src.domain.errors).
    """

    @abstractmethod
    async def list(self, resource: str, query: ListQuery | None = None) -> ListResult[Record]:
        """Return one page of records and the origin's total count."""

    @abstractmethod
    async def get_one(self, resource: str, id: RecordId) -> Record:
        """Return a single record; raises NotFoundError when the origin refuses."""

    @abstractmethod
    async def get_many(self, resource: str, ids: Sequence[RecordId]) -> list[Record]:
        """Return the records for ids, in whatever order the origin chooses."""

    @abstractmethod
    async def get_many_reference(
        self,
        resource: str,
        target: str,
        id: RecordId,
        query: ListQuery | None = None,
    ) -> ListResult[Record]:
        """Return records whose target field references id."""

    @abstractmethod
    async def create(self, resource: str, data: dict[str, Any]) -> Record:
        """Create a record and return it as stored by the origin."""

    @abstractmethod
    async def update(self, resource: str, id: RecordId, data: dict[str, Any]) -> Record:
        """Replace the record with the given id and return the stored version."""

    @abstractmethod
    async def update_many(
        self, resource: str, ids: Sequence[RecordId], data: dict[str, Any]
    ) -> list[RecordId]:
        """Apply data to every id.  Implementations may refuse (NotImplementedError)."""

    @abstractmethod
    async def delete(self, resource: str, id: RecordId) -> Record:
        """Delete the record and return {"id": id}."""

    @abstractmethod
    async def delete_many(
        self,
        resource: str,
        ids: Sequence[RecordId],
        policy: BatchPolicy = BatchPolicy.FAIL_FAST,
    ) -> DeleteManyResult:
        """Delete every id concurrently; completed deletes are never rolled back."""
