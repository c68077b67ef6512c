"""Typed repositories over a DataProvider.

RestRepository[T] validates the provider's plain Records into a pydantic
model T and dumps T back to the origin's field names on write.  The
get_repositories() factory wires one repository per typed resource.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel

from src.domain.errors import NotFoundError
from src.domain.models.queries import ListQuery
from src.domain.models.records import ListResult, Record, RecordId
from src.domain.models.resources import Expense, Leave
from src.domain.repositories.base import Repository
from src.domain.repositories.data_provider import DataProvider
from src.domain.services.normalization import ID_FIELD, NATIVE_KEY

from .endpoints import Resource

M = TypeVar("M", bound=BaseModel)


class RestRepository(Repository[M]):
    def __init__(self, provider: DataProvider, resource: str, model: type[M]) -> None:
        self._provider = provider
        self._resource = resource
        self._model = model

    def _to_domain(self, record: Record) -> M:
        fields = {k: v for k, v in record.items() if k != NATIVE_KEY}
        return self._model.model_validate(fields)

    @staticmethod
    def _to_payload(entity: BaseModel) -> dict[str, Any]:
        payload = entity.model_dump(mode="json", by_alias=True, exclude_none=True)
        payload.pop(ID_FIELD, None)
        payload.pop(NATIVE_KEY, None)
        return payload

    async def get(self, id: RecordId) -> M | None:
        try:
            record = await self._provider.get_one(self._resource, id)
        except NotFoundError as e:
            if e.status != 404:
                raise
            return None
        return self._to_domain(record)

    async def list(self, query: ListQuery | None = None) -> ListResult[M]:
        page = await self._provider.list(self._resource, query)
        return ListResult[self._model](
            data=[self._to_domain(record) for record in page.data],
            total=page.total,
        )

    async def create(self, entity: M) -> M:
        record = await self._provider.create(self._resource, self._to_payload(entity))
        return self._to_domain(record)

    async def update(self, entity: M) -> M:
        id = getattr(entity, ID_FIELD, None)
        if id is None:
            raise ValueError(f"{type(entity).__name__} has no id; create it first")
        record = await self._provider.update(self._resource, id, self._to_payload(entity))
        return self._to_domain(record)

    async def delete(self, id: RecordId) -> None:
        await self._provider.delete(self._resource, id)


@dataclass
class Repositories:
    """All typed repositories bound to a single DataProvider."""

    expenses: RestRepository[Expense]
    leaves: RestRepository[Leave]


def get_repositories(provider: DataProvider) -> Repositories:
    """Construct all typed repositories bound to the given provider.

    Intended for use at the application boundary:

        async with create_http_client(credentials=store) as client:
            repos = get_repositories(RestDataProvider(client))
            leave = await repos.leaves.get(leave_id)
    """
    return Repositories(
        expenses=RestRepository(provider, Resource.EXPENSES, Expense),
        leaves=RestRepository(provider, Resource.LEAVES, Leave),
    )
