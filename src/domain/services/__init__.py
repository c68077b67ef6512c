"""Domain services package."""

from .normalization import normalize_list, normalize_record, parse_total
from .urls import build_url, build_url_with_params, encode_list_query

__all__ = [
    "build_url",
    "build_url_with_params",
    "encode_list_query",
    "normalize_list",
    "normalize_record",
    "parse_total",
]
