"""URL and query-string construction.

build_url              — join a base URL and an endpoint path
build_url_with_params  — build_url plus a query string (None values dropped)
encode_list_query      — ListQuery → ordered query parameters for list calls

List encoding:
    _start = (page - 1) * per_page      half-open index range [_start, _end)
    _end   = page * per_page
    _sort  = sort.field
    _order = sort.order
    <filter keys verbatim, in insertion order>
    q      = free-text term, always present (empty string when unset)

The origin may serve either range pagination or free-text search from the
same parameters; no per-resource knowledge is needed on this side.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from src.domain.models.queries import ListQuery

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


def has_scheme(endpoint: str) -> bool:
    return bool(_SCHEME.match(endpoint))


def build_url(base_url: str, endpoint: str) -> str:
    """Return the absolute URL for endpoint.

    Fully-qualified endpoints are returned unchanged.  Otherwise exactly one
    "/" separates the base (trailing slashes removed) from the endpoint
    (leading slashes removed).
    """
    if has_scheme(endpoint):
        return endpoint
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"


def stringify(value: Any) -> str:
    """Render a query value the way the origin expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(v) for v in value)
    if isinstance(value, Enum):
        return stringify(value.value)
    return str(value)


def encode_params(params: Mapping[str, Any]) -> str:
    """Form-encode params in insertion order, omitting None values."""
    return urlencode([(key, stringify(value)) for key, value in params.items() if value is not None])


def build_url_with_params(base_url: str, endpoint: str, params: Mapping[str, Any] | None) -> str:
    url = build_url(base_url, endpoint)
    query = encode_params(params or {})
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def encode_list_query(query: ListQuery) -> dict[str, Any]:
    """Return the ordered query parameters for a list call.

    A "q" entry inside filter is treated as the free-text term when query.q
    is unset; it is emitted once, last.
    """
    params: dict[str, Any] = {
        "_start": query.pagination.start,
        "_end": query.pagination.end,
        "_sort": query.sort.field,
        "_order": query.sort.order.value,
    }
    for key, value in query.filter.items():
        if key != "q":
            params[key] = value
    params["q"] = query.q or query.filter.get("q") or ""
    return params
