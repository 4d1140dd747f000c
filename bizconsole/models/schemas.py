"""Pydantic schemas for the console pages.

Two families live here:

* ``*Draft`` models validate what the user typed into a dialog before it is
  sent. Required-field failures carry a human readable message so dialogs can
  show it inline.
* ``*Record`` models validate backend rows at ingress so we fail fast when a
  payload changes shape.
"""
import datetime as dt
from typing import Any, ClassVar, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

ATTENDANCE_STATUSES = ("Present", "Absent", "Leave", "Late")
LEAVE_STATUSES = ("Pending", "Approved", "Rejected")
TASK_PRIORITIES = ("Low", "Medium", "High")


def field_label(name: str) -> str:
    label = name.replace("_id", "").replace("_", " ").strip()
    return label[:1].upper() + label[1:]


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def first_error_message(exc: ValidationError) -> str:
    """Collapse a ValidationError into the single line shown in a dialog."""
    errors = exc.errors()
    if not errors:
        return "Invalid input."
    err = errors[0]
    ctx_error = (err.get("ctx") or {}).get("error")
    if err["type"] == "value_error" and ctx_error is not None:
        return str(ctx_error)
    loc = err.get("loc") or ()
    label = field_label(str(loc[0])) if loc else "Form"
    if err["type"] == "missing":
        return f"{label} is required."
    return f"{label}: {err['msg']}"


class DraftModel(BaseModel):
    """Base for dialog drafts: strips text and rejects blank required fields."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    required_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def required_not_blank(cls, data: Any) -> Any:
        if isinstance(data, dict):
            for name in cls.required_fields:
                if is_blank(data.get(name)):
                    raise ValueError(f"{field_label(name)} is required.")
        return data

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


# ---------------------------------------------------------------------------
# Support tickets
# ---------------------------------------------------------------------------


class TicketDraft(DraftModel):
    required_fields: ClassVar[Tuple[str, ...]] = ("subject", "message")

    subject: str
    message: str


class TicketRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    subject: str
    message: str = ""
    status: str = Field(default="Open")
    date: Optional[str] = None


# ---------------------------------------------------------------------------
# Attendance
# ---------------------------------------------------------------------------


class AttendanceDraft(DraftModel):
    required_fields: ClassVar[Tuple[str, ...]] = ("employee_id", "date", "status")

    employee_id: int
    date: dt.date
    check_in: Optional[dt.time] = None
    check_out: Optional[dt.time] = None
    status: Literal["Present", "Absent", "Leave", "Late"] = "Present"
    notes: str = ""

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def blank_time_is_none(cls, v: Any) -> Any:
        return None if is_blank(v) else v

    @model_validator(mode="after")
    def present_needs_times(self):
        if self.status == "Present" and (self.check_in is None or self.check_out is None):
            raise ValueError("Check-In and Check-Out are required for 'Present' status.")
        return self

    def _stamp(self, value: Optional[dt.time]) -> Optional[str]:
        if value is None:
            return None
        return f"{self.date.isoformat()}T{value.strftime('%H:%M')}:00.000Z"

    def to_payload(self) -> Dict[str, Any]:
        return {
            "employee_id": self.employee_id,
            "date": self.date.isoformat(),
            "check_in_time": self._stamp(self.check_in),
            "check_out_time": self._stamp(self.check_out),
            "status": self.status,
            "notes": self.notes or "",
        }


class AttendanceRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    employee_id: Optional[int] = None
    date: str = ""
    check_in: str = ""
    check_out: str = ""
    status: str = "Present"
    notes: str = ""


# ---------------------------------------------------------------------------
# Leave requests
# ---------------------------------------------------------------------------


class LeaveDraft(DraftModel):
    required_fields: ClassVar[Tuple[str, ...]] = ("employee_id", "leave_type_id", "from_date", "to_date", "reason")

    employee_id: int
    leave_type_id: int
    from_date: dt.date
    to_date: dt.date
    reason: str
    status: Literal["Pending", "Approved", "Rejected"] = "Pending"

    @model_validator(mode="after")
    def range_in_order(self):
        if self.to_date < self.from_date:
            raise ValueError("To date cannot be before from date.")
        return self

    @property
    def total_days(self) -> int:
        return (self.to_date - self.from_date).days + 1

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        payload["total_days"] = self.total_days
        return payload


class LeaveRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    employee_id: Optional[int] = None
    leave_type_id: Optional[int] = None
    from_date: str = ""
    to_date: str = ""
    total_days: int = 0
    reason: str = ""
    status: str = "Pending"


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------


class TaskDraft(DraftModel):
    required_fields: ClassVar[Tuple[str, ...]] = ("title", "assigned_to", "due_date")

    title: str
    description: str = ""
    assigned_to: str
    priority: Literal["Low", "Medium", "High"] = "Medium"
    due_date: dt.date

    @field_validator("assigned_to", mode="before")
    @classmethod
    def coerce_assignee(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v


class TaskRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    description: str = ""
    assigned_to: str = ""
    priority: str = "Medium"
    due_date: str = ""
    status: str = "Pending"

    @field_validator("id", "assigned_to", mode="before")
    @classmethod
    def ids_as_text(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v
