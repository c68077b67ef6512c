"""Response normalization.

Maps the origin's native primary key (default "_id") onto the canonical
"id" field.  The native key is copied, never moved, so callers that still
read "_id" keep working.  Normalization is idempotent: a record that
already carries the same "id" comes back unchanged.
"""

from __future__ import annotations

import re
from typing import Any

from src.domain.errors import InvalidResponseError
from src.domain.models.records import ListResult, Record, RecordId

NATIVE_KEY = "_id"
ID_FIELD = "id"

_LEADING_INT = re.compile(r"^\s*\+?(\d+)")


def _as_record_id(value: Any) -> RecordId:
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return value
    return str(value)


def normalize_record(raw: Any, key: str = NATIVE_KEY, default_id: RecordId | None = None) -> Record:
    """Return a copy of raw with a populated canonical id.

    Resolution order: raw[key], an existing raw["id"], default_id.
    Raises InvalidResponseError when raw is not an object or no identifier
    can be found.
    """
    if not isinstance(raw, dict):
        raise InvalidResponseError(f"Expected a JSON object, got {type(raw).__name__}", data=raw)

    record = dict(raw)
    for candidate in (raw.get(key), raw.get(ID_FIELD), default_id):
        if candidate is not None:
            record[ID_FIELD] = _as_record_id(candidate)
            return record
    raise InvalidResponseError(f"Record has no identifier (looked for {key!r} and {ID_FIELD!r})", data=raw)


def parse_total(value: str | None, default: int = 0) -> int:
    """Parse a total-count header value.

    The leading run of digits counts and trailing junk is
    ignored.  Absent, negative or non-numeric values give default.
    """
    if value is None:
        return default
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else default


def normalize_list(
    raw_items: Any,
    total_header: str | None,
    key: str = NATIVE_KEY,
    default_total: int = 0,
) -> ListResult[Record]:
    """Normalize a JSON array of records and attach the origin's total."""
    if raw_items is None:
        raw_items = []
    if not isinstance(raw_items, list):
        raise InvalidResponseError(
            f"Expected a JSON array, got {type(raw_items).__name__}", data=raw_items
        )
    return ListResult[Record](
        data=[normalize_record(item, key) for item in raw_items],
        total=parse_total(total_header, default_total),
    )
