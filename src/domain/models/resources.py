"""Typed resource schemas.

Shapes only: these models validate what the origin returns for a resource
and what is sent back on create/update.  Field names follow Python
conventions; aliases carry the origin's camelCase names.  Unknown origin
fields are kept (extra="allow") so a round trip never drops data.
"""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import ExpenseCategory, LeaveStatus, LeaveType, PaymentMode
from .records import RecordId


class ResourceModel(BaseModel):
    """Base for records fetched through a typed repository.

    id is the canonical identifier; it is None only for entities that have
    not been created on the origin yet.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: RecordId | None = None
    created_at: dt.datetime | None = Field(default=None, alias="createdAt")
    updated_at: dt.datetime | None = Field(default=None, alias="updatedAt")


class Expense(ResourceModel):
    """A clinic expense entry.

    doctor is the origin's doctor id; doctor_name is denormalized by the
    origin for list views and is never required on input.
    """

    date: dt.date
    category: ExpenseCategory
    title: str
    amount: float = Field(ge=0.0)
    notes: str | None = None
    payment_mode: PaymentMode | None = Field(default=None, alias="paymentMode")
    doctor: str
    doctor_name: str | None = Field(default=None, alias="doctorName")


class Leave(ResourceModel):
    """A doctor leave request.

    doctor_id is either the bare doctor id or the origin's populated
    {"_id", "name"} object.
    """

    doctor_id: str | dict[str, Any] = Field(alias="doctorId")
    doctor_name: str | None = Field(default=None, alias="doctorName")
    start_date: dt.date = Field(alias="startDate")
    end_date: dt.date = Field(alias="endDate")
    leave_type: LeaveType = Field(alias="leaveType")
    reason: str
    status: LeaveStatus = LeaveStatus.PENDING
    applied_date: str | None = Field(default=None, alias="appliedDate")
    approved_by: str | None = Field(default=None, alias="approvedBy")
    approved_date: str | None = Field(default=None, alias="approvedDate")
    rejection_reason: str | None = Field(default=None, alias="rejectionReason")
    documents: list[str] = Field(default_factory=list)
    notes: str | None = None

    @model_validator(mode="after")
    def _valid_range(self) -> Leave:
        if self.end_date < self.start_date:
            raise ValueError(
                f"end_date ({self.end_date}) must not precede start_date ({self.start_date})"
            )
        return self
