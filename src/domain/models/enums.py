"""Domain enumerations for the records gateway.

All string-valued enums use str mixin so they serialize cleanly to JSON
and remain comparable to plain strings (query strings, request methods).
"""

from enum import Enum


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class BatchPolicy(str, Enum):
    """Join policy for fan-out batch operations (delete_many).

    FAIL_FAST   — raise the first error to complete; cancel work still in flight.
    COLLECT_ALL — wait for every task and report one outcome per id.
    """

    FAIL_FAST = "fail_fast"
    COLLECT_ALL = "collect_all"


class ExpenseCategory(str, Enum):
    SALARY = "salary"
    COMMISSION = "commission"
    RENT = "rent"
    OTHER = "other"


class PaymentMode(str, Enum):
    CASH = "cash"
    UPI = "upi"
    CARD = "card"
    BANK = "bank"


class LeaveType(str, Enum):
    CASUAL = "casual"
    SICK = "sick"
    VACATION = "vacation"
    EMERGENCY = "emergency"
    OTHER = "other"


class LeaveStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
