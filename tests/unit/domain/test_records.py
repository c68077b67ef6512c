"""Tests for src/domain/models/records.py."""

import pytest
from pydantic import ValidationError

from src.domain.errors import HttpStatusError
from src.domain.models.records import DeleteManyResult, DeleteOutcome, ListResult


# --- ListResult ---

def test_list_result_defaults_to_empty_page():
    r = ListResult()
    assert r.data == []
    assert r.total == 0


def test_list_result_total_may_exceed_data_length():
    r = ListResult(data=[{"id": 1}], total=250)
    assert r.total == 250


def test_list_result_total_may_be_below_data_length():
    r = ListResult(data=[{"id": 1}, {"id": 2}], total=1)
    assert len(r.data) == 2


def test_list_result_negative_total_raises():
    with pytest.raises(ValidationError):
        ListResult(total=-1)


def test_list_result_parametrized_with_record_type():
    r = ListResult[dict](data=[{"id": "a"}], total=1)
    assert r.data[0]["id"] == "a"


# --- DeleteOutcome ---

def test_delete_outcome_ok_without_error():
    assert DeleteOutcome(id="a").ok is True


def test_delete_outcome_not_ok_with_error():
    outcome = DeleteOutcome(id="b", error=HttpStatusError("nope", status=500))
    assert outcome.ok is False


def test_delete_outcome_keeps_integer_id():
    assert DeleteOutcome(id=7).id == 7


# --- DeleteManyResult ---

def _mixed() -> DeleteManyResult:
    return DeleteManyResult(
        outcomes=[
            DeleteOutcome(id="a"),
            DeleteOutcome(id="b", error=HttpStatusError("nope", status=500)),
            DeleteOutcome(id="c"),
        ]
    )


def test_delete_many_ids_lists_only_successes():
    assert _mixed().ids == ["a", "c"]


def test_delete_many_failed_lists_failures():
    assert [o.id for o in _mixed().failed] == ["b"]


def test_delete_many_not_ok_when_any_failed():
    assert _mixed().ok is False


def test_empty_delete_many_result_is_ok():
    assert DeleteManyResult().ok is True
