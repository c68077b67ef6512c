"""List query and request option models.

ListQuery      — page / sort / filter / free-text parameters for list calls
RequestOptions — per-call transport settings (method, payload, headers, timeout)
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .enums import HttpMethod, SortOrder


class Pagination(BaseModel):
    """1-based page number and page size."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=10, ge=1)

    @property
    def start(self) -> int:
        """Inclusive start index of the half-open [start, end) range."""
        return (self.page - 1) * self.per_page

    @property
    def end(self) -> int:
        return self.page * self.per_page


class Sort(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str = "id"
    order: SortOrder = SortOrder.ASC


class ListQuery(BaseModel):
    """Parameters for a page of records.

    filter values are passed to the origin verbatim, one query parameter per
    key.  q is the free-text search term; it is always sent (empty when unset)
    so the origin can choose between range pagination and search.
    """

    model_config = ConfigDict(frozen=True)

    pagination: Pagination = Field(default_factory=Pagination)
    sort: Sort = Field(default_factory=Sort)
    filter: dict[str, Any] = Field(default_factory=dict)
    q: str | None = None

    @classmethod
    def page(
        cls,
        page: int = 1,
        per_page: int = 10,
        field: str = "id",
        order: SortOrder = SortOrder.ASC,
        **filters: Any,
    ) -> ListQuery:
        """Named constructor for the common flat form of a list query."""
        return cls(
            pagination=Pagination(page=page, per_page=per_page),
            sort=Sort(field=field, order=order),
            filter=filters,
        )

    def with_filter(self, **filters: Any) -> ListQuery:
        """Return a copy with extra filter entries merged in (later keys win)."""
        return self.model_copy(update={"filter": {**self.filter, **filters}})


class RequestOptions(BaseModel):
    """Per-call transport options.

    timeout_ms overrides the client default when set.  headers set here are
    never overwritten by the transport's defaults.  body is JSON-serialized for
    ordinary requests; with files set it is sent as multipart form fields.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    method: HttpMethod = HttpMethod.GET
    body: Any = None
    files: Any = None
    headers: dict[str, str] = Field(default_factory=dict)
    timeout_ms: int | None = Field(default=None, gt=0)
    skip_auth: bool = False

    @property
    def is_multipart(self) -> bool:
        return self.files is not None
