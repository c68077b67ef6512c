"""Tests for src/domain/models/__init__.py — package exports."""

from src.domain.models import __all__ as domain_all
from src.domain.models import (
    # spot-check one import from each module
    DeleteManyResult,
    Expense,
    ListQuery,
    SortOrder,
)


def test_domain_models_exports_19_names():
    assert len(domain_all) == 19


def test_sort_order_importable_from_package():
    assert SortOrder.ASC == "ASC"


def test_list_query_importable_from_package():
    assert ListQuery.__name__ == "ListQuery"


def test_delete_many_result_importable_from_package():
    assert DeleteManyResult.__name__ == "DeleteManyResult"


def test_expense_importable_from_package():
    assert Expense.__name__ == "Expense"
