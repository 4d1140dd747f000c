"""Leave requests page."""

from __future__ import annotations

from typing import Any, Dict, List

from bizconsole.exceptions import ApiError
from bizconsole.models.schemas import LEAVE_STATUSES, LeaveDraft, LeaveRecord
from gui.dialogs.form_flow import ConfirmDialogFlow, FormDialogFlow
from gui.services import employee_service, leave_service
from gui.utils.logging import logger
from gui.views.base import BaseView

EMPTY_LEAVE = {
    "employee_id": "",
    "leave_type_id": "",
    "from_date": "",
    "to_date": "",
    "reason": "",
    "status": "Pending",
}


class LeaveRequestsView(BaseView):
    name = "leave_requests"
    title = "Leave Requests"
    search_fields = ("employee", "leave_type", "reason", "status")
    statuses = LEAVE_STATUSES

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.employees: List[Dict[str, Any]] = []
        self.leave_types: List[Dict[str, Any]] = []
        options = self.flow_options()
        self.leave_dialog = FormDialogFlow(
            "leave",
            LeaveDraft,
            save=lambda draft, editing: leave_service.save_leave(self.client, draft, editing),
            on_saved=self.upsert_saved,
            defaults=EMPTY_LEAVE,
            failure_message="Failed to save leave request.",
            success_message="Leave request created!",
            updated_message="Leave request updated!",
            **options,
        )
        self.delete_dialog = ConfirmDialogFlow(
            "leave-delete",
            action=lambda record: leave_service.delete_leave(self.client, record),
            on_done=self.remove_row,
            failure_message="Failed to delete leave request.",
            success_message="Leave request deleted successfully!",
            **options,
        )

    def dialogs(self):
        return (self.leave_dialog, self.delete_dialog)

    def fetch(self):
        company_id = self.settings.company_id
        try:
            self.employees = employee_service.fetch_employees(self.client, company_id)
            self.leave_types = leave_service.fetch_leave_types(self.client)
        except ApiError as exc:
            logger.warning("Failed to load leave lookups: %s", exc)
        return leave_service.fetch_leaves(self.client, company_id)

    def request_leave(self) -> int:
        return self.leave_dialog.open_add()

    def edit_leave(self, record: LeaveRecord) -> int:
        values = record.model_dump(include={"employee_id", "leave_type_id", "from_date", "to_date", "reason", "status"})
        return self.leave_dialog.open_edit(record, values)

    def confirm_delete(self, record: LeaveRecord) -> int:
        return self.delete_dialog.open_for(record)

    def leave_type_name(self, leave_type_id: Any) -> str:
        for item in self.leave_types:
            if str(item["id"]) == str(leave_type_id):
                return item["name"]
        return "–"

    def display_rows(self) -> List[Dict[str, Any]]:
        return [
            {
                **row.model_dump(),
                "employee": employee_service.employee_name(self.employees, row.employee_id),
                "leave_type": self.leave_type_name(row.leave_type_id),
            }
            for row in self.rows
        ]

    def status_counts(self) -> Dict[str, int]:
        counts = {status: 0 for status in self.statuses}
        for row in self.rows:
            counts[row.status] = counts.get(row.status, 0) + 1
        return counts
