"""Record and result models.

Record           — plain field → value mapping carrying a canonical "id"
ListResult[T]    — one page of records plus the origin's total count
DeleteOutcome    — result of deleting a single id inside a batch
DeleteManyResult — per-id outcomes of a batch delete, in request order
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from src.domain.errors import ApiError

Record = dict[str, Any]
RecordId = str | int

T = TypeVar("T")


class ListResult(BaseModel, Generic[T]):
    """A page of records.

    total is the origin's count, trusted verbatim: it may disagree with
    len(data) and is never reconciled here.
    """

    model_config = ConfigDict(frozen=True)

    data: list[T] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)


class DeleteOutcome(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: RecordId
    error: ApiError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DeleteManyResult(BaseModel):
    """Outcome of a non-atomic batch delete.

    Deletes that succeeded are not rolled back when others fail; callers
    reconcile by re-listing.
    """

    model_config = ConfigDict(frozen=True)

    outcomes: list[DeleteOutcome] = Field(default_factory=list)

    @property
    def ids(self) -> list[RecordId]:
        """Ids the origin confirmed as deleted."""
        return [o.id for o in self.outcomes if o.ok]

    @property
    def failed(self) -> list[DeleteOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        return not self.failed
