"""Origin resource paths.

Resource values are the paths passed to DataProvider operations; the
helpers build the nested per-record endpoints used with HttpClient.
"""

from __future__ import annotations

from enum import Enum

from src.domain.models.records import RecordId


class Resource(str, Enum):
    AUTH_LOGIN = "auth/login"
    AUTH_LOGOUT = "auth/logout"
    AUTH_REFRESH = "auth/refresh"

    DOCTORS = "doctors"
    PATIENTS = "patients"
    LEAVES = "leaves"
    EXPENSES = "expenses"
    APPOINTMENTS = "appointments"
    JOBS = "jobs"
    USERS = "users"

    WEEKLY_ASSIGNMENTS = "visits/weekly"
    WEEKLY_ASSIGNMENTS_ALL = "visits/weekly/all"
    WEEKLY_DOCTOR_STATS = "visits/weekly/doctor-stats"
    DAILY_VISIT_SUMMARY = "visits/daily-summary"
    EXPENSE_SUMMARY = "expenses/summary"


def _nested(resource: Resource, id: RecordId, *parts: str) -> str:
    return "/".join([resource.value, str(id), *parts])


def weekly_assignment(id: RecordId) -> str:
    return _nested(Resource.WEEKLY_ASSIGNMENTS, id)


def patient_notes(patient_id: RecordId) -> str:
    return _nested(Resource.PATIENTS, patient_id, "notes")


def patient_payments(patient_id: RecordId) -> str:
    return _nested(Resource.PATIENTS, patient_id, "visit-payments")


def patient_add_payment(patient_id: RecordId) -> str:
    return _nested(Resource.PATIENTS, patient_id, "add-payment")


def patient_visited_days(patient_id: RecordId) -> str:
    return _nested(Resource.PATIENTS, patient_id, "visited-days")


def patient_add_visited_day(patient_id: RecordId) -> str:
    return _nested(Resource.PATIENTS, patient_id, "add-visited-day")
