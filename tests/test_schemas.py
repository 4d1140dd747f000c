import pytest
from datetime import date
from pydantic import ValidationError

from bizconsole.models.schemas import (
    AttendanceDraft,
    LeaveDraft,
    TaskDraft,
    TaskRecord,
    TicketDraft,
    first_error_message,
)


def message_for(schema, **values):
    with pytest.raises(ValidationError) as info:
        schema.model_validate(values)
    return first_error_message(info.value)


def test_ticket_requires_subject():
    """A blank subject fails with a readable message."""
    assert message_for(TicketDraft, subject="  ", message="Help") == "Subject is required."


def test_ticket_strips_text():
    """Ticket text is stripped of surrounding whitespace."""
    draft = TicketDraft.model_validate({"subject": " Issue ", "message": " Help "})
    assert draft.to_payload() == {"subject": "Issue", "message": "Help"}


def test_attendance_present_needs_both_times():
    """Present status requires check-in and check-out."""
    msg = message_for(AttendanceDraft, employee_id="3", date="2025-11-04", check_in="09:00", check_out="", status="Present")
    assert msg == "Check-In and Check-Out are required for 'Present' status."


def test_attendance_absent_without_times():
    """Absent status validates without times."""
    draft = AttendanceDraft.model_validate(
        {"employee_id": "3", "date": "2025-11-04", "check_in": "", "check_out": "", "status": "Absent"}
    )
    payload = draft.to_payload()
    assert payload["employee_id"] == 3
    assert payload["check_in_time"] is None


def test_attendance_payload_timestamps():
    """Check times are stamped onto the record date."""
    draft = AttendanceDraft.model_validate(
        {"employee_id": 1, "date": "2025-11-04", "check_in": "09:05", "check_out": "17:30", "status": "Present"}
    )
    payload = draft.to_payload()
    assert payload["check_in_time"] == "2025-11-04T09:05:00.000Z"
    assert payload["check_out_time"] == "2025-11-04T17:30:00.000Z"


def test_attendance_missing_employee():
    """A missing employee is reported first."""
    assert message_for(AttendanceDraft, employee_id="", date="2025-11-04", status="Absent") == "Employee is required."


def test_attendance_bad_status_reports_field():
    """An unknown status names the failing field."""
    msg = message_for(AttendanceDraft, employee_id=1, date="2025-11-04", status="Holiday")
    assert msg.startswith("Status:")


def test_leave_total_days_inclusive():
    """Total days count both ends of the range."""
    draft = LeaveDraft.model_validate(
        {"employee_id": 1, "leave_type_id": 2, "from_date": "2025-03-01", "to_date": "2025-03-03", "reason": "Trip"}
    )
    assert draft.total_days == 3
    assert draft.to_payload()["total_days"] == 3
    assert draft.to_payload()["from_date"] == "2025-03-01"


def test_leave_range_order():
    """The to date cannot precede the from date."""
    msg = message_for(
        LeaveDraft, employee_id=1, leave_type_id=2, from_date="2025-03-05", to_date="2025-03-01", reason="x"
    )
    assert msg == "To date cannot be before from date."


def test_leave_requires_reason():
    """A blank reason is rejected."""
    msg = message_for(LeaveDraft, employee_id=1, leave_type_id=2, from_date="2025-03-01", to_date="2025-03-01", reason="")
    assert msg == "Reason is required."


def test_task_draft_defaults_and_assignee_text():
    """Priority defaults to Medium and numeric assignees become text."""
    draft = TaskDraft.model_validate({"title": "Close books", "assigned_to": 4, "due_date": date(2025, 12, 31)})
    assert draft.priority == "Medium"
    assert draft.to_payload()["assigned_to"] == "4"


def test_task_requires_due_date():
    """A blank due date is rejected."""
    assert message_for(TaskDraft, title="t", assigned_to="4", due_date="") == "Due date is required."


def test_task_record_ids_as_text():
    """Task record ids are coerced to strings."""
    assert TaskRecord.model_validate({"id": 12, "title": "x", "assigned_to": 3}).id == "12"
