"""Tests for src/domain/models/queries.py."""

import pytest
from pydantic import ValidationError

from src.domain.models.enums import HttpMethod, SortOrder
from src.domain.models.queries import ListQuery, Pagination, RequestOptions, Sort


# --- Pagination ---

def test_pagination_defaults():
    p = Pagination()
    assert (p.page, p.per_page) == (1, 10)


def test_pagination_first_page_range():
    p = Pagination(page=1, per_page=25)
    assert (p.start, p.end) == (0, 25)


def test_pagination_second_page_range():
    p = Pagination(page=2, per_page=10)
    assert (p.start, p.end) == (10, 20)


def test_pagination_page_zero_raises():
    with pytest.raises(ValidationError):
        Pagination(page=0)


def test_pagination_per_page_zero_raises():
    with pytest.raises(ValidationError):
        Pagination(per_page=0)


def test_pagination_is_frozen():
    with pytest.raises(ValidationError):
        Pagination().page = 3


# --- Sort ---

def test_sort_defaults_to_id_ascending():
    s = Sort()
    assert s.field == "id"
    assert s.order == SortOrder.ASC


def test_sort_rejects_unknown_order():
    with pytest.raises(ValidationError):
        Sort(order="SIDEWAYS")


# --- ListQuery ---

def test_list_query_defaults():
    q = ListQuery()
    assert q.pagination == Pagination()
    assert q.sort == Sort()
    assert q.filter == {}
    assert q.q is None


def test_list_query_page_constructor():
    q = ListQuery.page(3, 5, "name", SortOrder.DESC, status="active")
    assert q.pagination.start == 10
    assert q.sort.order == SortOrder.DESC
    assert q.filter == {"status": "active"}


def test_with_filter_merges_without_mutating():
    base = ListQuery(filter={"status": "active"})
    merged = base.with_filter(doctor="d1")
    assert merged.filter == {"status": "active", "doctor": "d1"}
    assert base.filter == {"status": "active"}


def test_with_filter_later_keys_win():
    q = ListQuery(filter={"status": "active"}).with_filter(status="archived")
    assert q.filter["status"] == "archived"


# --- RequestOptions ---

def test_request_options_defaults():
    o = RequestOptions()
    assert o.method == HttpMethod.GET
    assert o.body is None
    assert o.headers == {}
    assert o.timeout_ms is None
    assert o.skip_auth is False


def test_request_options_zero_timeout_raises():
    with pytest.raises(ValidationError):
        RequestOptions(timeout_ms=0)


def test_request_options_multipart_when_files_set():
    assert RequestOptions(files={"file": ("a.txt", b"x")}).is_multipart is True


def test_request_options_not_multipart_by_default():
    assert RequestOptions(body={"a": 1}).is_multipart is False
