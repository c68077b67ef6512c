"""Tests for src/domain/models/enums.py."""

from src.domain.models.enums import (
    BatchPolicy,
    ExpenseCategory,
    HttpMethod,
    LeaveStatus,
    LeaveType,
    PaymentMode,
    SortOrder,
)


# --- str mixin ---

def test_sort_order_compares_to_plain_string():
    assert SortOrder.DESC == "DESC"


def test_http_method_values_are_upper_case_verbs():
    assert [m.value for m in HttpMethod] == ["GET", "POST", "PUT", "PATCH", "DELETE"]


def test_batch_policy_from_value():
    assert BatchPolicy("collect_all") is BatchPolicy.COLLECT_ALL


def test_expense_category_from_value():
    assert ExpenseCategory("rent") is ExpenseCategory.RENT


def test_payment_mode_has_four_members():
    assert len(PaymentMode) == 4


def test_leave_type_from_value():
    assert LeaveType("sick") is LeaveType.SICK


def test_leave_status_members():
    assert {s.value for s in LeaveStatus} == {"pending", "approved", "rejected"}
