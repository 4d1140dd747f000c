"""Data schemas and validation."""
from .schemas import (
    AttendanceDraft,
    AttendanceRecord,
    LeaveDraft,
    LeaveRecord,
    TaskDraft,
    TaskRecord,
    TicketDraft,
    TicketRecord,
    first_error_message,
)

__all__ = [
    "AttendanceDraft",
    "AttendanceRecord",
    "LeaveDraft",
    "LeaveRecord",
    "TaskDraft",
    "TaskRecord",
    "TicketDraft",
    "TicketRecord",
    "first_error_message",
]
