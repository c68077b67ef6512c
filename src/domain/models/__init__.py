"""Records gateway models.

Query parameters (ListQuery, RequestOptions), result shapes (ListResult,
DeleteManyResult) and typed resource schemas (Expense, Leave).  Nothing here
performs I/O.
"""

from .enums import (
    BatchPolicy,
    ExpenseCategory,
    HttpMethod,
    LeaveStatus,
    LeaveType,
    PaymentMode,
    SortOrder,
)
from .queries import ListQuery, Pagination, RequestOptions, Sort
from .records import DeleteManyResult, DeleteOutcome, ListResult, Record, RecordId
from .resources import Expense, Leave, ResourceModel

__all__ = [
    # enums
    "BatchPolicy",
    "ExpenseCategory",
    "HttpMethod",
    "LeaveStatus",
    "LeaveType",
    "PaymentMode",
    "SortOrder",
    # queries
    "ListQuery",
    "Pagination",
    "RequestOptions",
    "Sort",
    # records
    "DeleteManyResult",
    "DeleteOutcome",
    "ListResult",
    "Record",
    "RecordId",
    # resources
    "Expense",
    "Leave",
    "ResourceModel",
]
