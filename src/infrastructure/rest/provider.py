"""REST implementation of DataProvider.

Each operation composes URL building, one or more HttpClient calls and
response normalization.  Operations share nothing but the client.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from enum import Enum
from typing import Any
from urllib.parse import quote

from src.domain.errors import (
    ApiError,
    HttpStatusError,
    NotFoundError,
    RecordAccessDeniedError,
    UnauthorizedError,
)
from src.domain.models.enums import BatchPolicy
from src.domain.models.queries import ListQuery
from src.domain.models.records import (
    DeleteManyResult,
    DeleteOutcome,
    ListResult,
    Record,
    RecordId,
)
from src.domain.repositories.data_provider import DataProvider
from src.domain.services.normalization import ID_FIELD, NATIVE_KEY, normalize_list, normalize_record
from src.domain.services.urls import encode_list_query
from src.infrastructure.http.client import HttpClient

logger = logging.getLogger(__name__)

TOTAL_COUNT_HEADER = "X-Total-Count"


class RestDataProvider(DataProvider):
    """DataProvider over a json-server style REST origin.

    key is the origin's native primary-key field, mapped onto "id".
    """

    def __init__(self, client: HttpClient, key: str = NATIVE_KEY) -> None:
        self._client = client
        self._key = key

    @staticmethod
    def _path(resource: str, id: RecordId | None = None) -> str:
        path = resource.value if isinstance(resource, Enum) else resource
        if id is None:
            return path
        return f"{path.rstrip('/')}/{quote(str(id), safe='')}"

    async def list(self, resource: str, query: ListQuery | None = None) -> ListResult[Record]:
        query = query or ListQuery()
        url = self._client.build_url_with_params(self._path(resource), encode_list_query(query))
        response = await self._client.send(url)
        return normalize_list(response.data, response.headers.get(TOTAL_COUNT_HEADER), self._key)

    async def get_one(self, resource: str, id: RecordId) -> Record:
        try:
            raw = await self._client.get(self._path(resource, id))
        except NotFoundError:
            raise
        except UnauthorizedError as e:
            raise RecordAccessDeniedError(e.message, status=e.status, data=e.data) from e
        except HttpStatusError as e:
            raise NotFoundError(e.message, status=e.status, data=e.data) from e
        return normalize_record(raw, self._key)

    async def get_many(self, resource: str, ids: Sequence[RecordId]) -> list[Record]:
        if not ids:
            return []
        url = self._client.build_url_with_params(self._path(resource), {"ids": list(ids)})
        raw = await self._client.get(url)
        return normalize_list(raw, None, self._key).data

    async def get_many_reference(
        self,
        resource: str,
        target: str,
        id: RecordId,
        query: ListQuery | None = None,
    ) -> ListResult[Record]:
        params = encode_list_query(query.with_filter(**{target: id})) if query else {target: id}
        url = self._client.build_url_with_params(self._path(resource), params)
        response = await self._client.send(url)
        items = response.data
        return normalize_list(
            items,
            response.headers.get(TOTAL_COUNT_HEADER),
            self._key,
            default_total=len(items) if isinstance(items, list) else 0,
        )

    async def create(self, resource: str, data: dict[str, Any]) -> Record:
        body = await self._client.post(self._path(resource), data)
        if isinstance(body, dict) and isinstance(body.get("data"), dict):
            envelope_id = body.get("id")
            if envelope_id is None:
                envelope_id = body.get(self._key)
            record = normalize_record(body["data"], self._key, default_id=envelope_id)
            if envelope_id is not None:
                record[ID_FIELD] = envelope_id
            return record
        return normalize_record(body, self._key)

    async def update(self, resource: str, id: RecordId, data: dict[str, Any]) -> Record:
        body = await self._client.put(self._path(resource, id), data)
        return normalize_record(body, self._key, default_id=id)

    async def update_many(
        self, resource: str, ids: Sequence[RecordId], data: dict[str, Any]
    ) -> list[RecordId]:
        raise NotImplementedError(
            "update_many has no batch endpoint on the origin; call update() per id"
        )

    async def delete(self, resource: str, id: RecordId) -> Record:
        await self._client.delete(self._path(resource, id))
        return {"id": id}

    async def delete_many(
        self,
        resource: str,
        ids: Sequence[RecordId],
        policy: BatchPolicy = BatchPolicy.FAIL_FAST,
    ) -> DeleteManyResult:
        """Delete every id concurrently.

        FAIL_FAST raises the first error to complete and cancels deletes that
        are still in flight.  COLLECT_ALL waits for all of them and reports
        one outcome per id.  Deletes the origin already applied stay applied.
        """
        if not ids:
            return DeleteManyResult()

        tasks = [asyncio.create_task(self.delete(resource, id)) for id in ids]
        try:
            if policy is BatchPolicy.FAIL_FAST:
                done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
                failed = next((t for t in tasks if t in done and t.exception() is not None), None)
                if failed is not None:
                    for task in pending:
                        task.cancel()
                    await asyncio.gather(*pending, return_exceptions=True)
                    logger.warning(
                        "delete_many on %s aborted after a failure; %d in-flight delete(s) cancelled",
                        self._path(resource),
                        len(pending),
                    )
                    raise failed.exception()
            else:
                await asyncio.wait(tasks)
        except asyncio.CancelledError:
            for task in tasks:
                task.cancel()
            raise

        outcomes = []
        for id, task in zip(ids, tasks):
            error = task.exception()
            if error is not None:
                if not isinstance(error, ApiError):
                    raise error
                logger.warning("DELETE %s failed: %s", self._path(resource, id), error)
            outcomes.append(DeleteOutcome(id=id, error=error))
        return DeleteManyResult(outcomes=outcomes)
