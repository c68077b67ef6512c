"""Tests for src/infrastructure/rest/endpoints.py."""

import pytest

from src.infrastructure.rest.endpoints import (
    Resource,
    patient_add_payment,
    patient_add_visited_day,
    patient_notes,
    patient_payments,
    patient_visited_days,
    weekly_assignment,
)


def test_resource_values_are_relative_paths():
    for resource in Resource:
        assert not resource.value.startswith("/")
        assert not resource.value.endswith("/")


def test_resource_compares_to_plain_string():
    assert Resource.PATIENTS == "patients"


@pytest.mark.parametrize("resource,path", [
    (Resource.AUTH_LOGIN, "auth/login"),
    (Resource.WEEKLY_ASSIGNMENTS_ALL, "visits/weekly/all"),
    (Resource.DAILY_VISIT_SUMMARY, "visits/daily-summary"),
    (Resource.EXPENSE_SUMMARY, "expenses/summary"),
])
def test_resource_paths(resource, path):
    assert resource.value == path


def test_weekly_assignment_path():
    assert weekly_assignment("w1") == "visits/weekly/w1"


@pytest.mark.parametrize("helper,suffix", [
    (patient_notes, "notes"),
    (patient_payments, "visit-payments"),
    (patient_add_payment, "add-payment"),
    (patient_visited_days, "visited-days"),
    (patient_add_visited_day, "add-visited-day"),
])
def test_patient_nested_paths(helper, suffix):
    assert helper("p1") == f"patients/p1/{suffix}"


def test_nested_path_accepts_int_id():
    assert patient_notes(7) == "patients/7/notes"
