"""Attendance management page."""

from __future__ import annotations

from typing import Any, Dict, List

from bizconsole.exceptions import ApiError
from bizconsole.models.schemas import ATTENDANCE_STATUSES, AttendanceDraft, AttendanceRecord
from gui.dialogs.form_flow import ConfirmDialogFlow, FormDialogFlow
from gui.services import attendance_service, employee_service
from gui.utils.logging import logger
from gui.views.base import BaseView

EMPTY_RECORD = {
    "employee_id": "",
    "date": "",
    "check_in": "",
    "check_out": "",
    "status": "Present",
    "notes": "",
}


class AttendanceView(BaseView):
    name = "attendance"
    title = "Attendance"
    search_fields = ("employee", "date", "status", "notes")
    statuses = ATTENDANCE_STATUSES

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.employees: List[Dict[str, Any]] = []
        options = self.flow_options()
        self.record_dialog = FormDialogFlow(
            "attendance",
            AttendanceDraft,
            save=lambda draft, editing: attendance_service.save_attendance(self.client, draft, editing),
            on_saved=self.upsert_saved,
            defaults=EMPTY_RECORD,
            failure_message="Error saving attendance record.",
            **options,
        )
        self.delete_dialog = ConfirmDialogFlow(
            "attendance-delete",
            action=lambda record: attendance_service.delete_attendance(self.client, record),
            on_done=self.remove_row,
            failure_message="Failed to delete attendance record.",
            **options,
        )

    def dialogs(self):
        return (self.record_dialog, self.delete_dialog)

    def fetch(self):
        company_id = self.settings.company_id
        try:
            self.employees = employee_service.fetch_employees(self.client, company_id)
        except ApiError as exc:
            # the table still renders without names
            logger.warning("Failed to load employees: %s", exc)
            self.employees = []
        return attendance_service.fetch_attendance(self.client, company_id)

    def add_record(self) -> int:
        return self.record_dialog.open_add()

    def edit_record(self, record: AttendanceRecord) -> int:
        values = record.model_dump(exclude={"id"})
        return self.record_dialog.open_edit(record, values)

    def confirm_delete(self, record: AttendanceRecord) -> int:
        return self.delete_dialog.open_for(record)

    def display_rows(self) -> List[Dict[str, Any]]:
        return [
            {
                **row.model_dump(),
                "employee": employee_service.employee_name(self.employees, row.employee_id),
                "total_hours": attendance_service.worked_hours(row.check_in, row.check_out),
            }
            for row in self.rows
        ]
