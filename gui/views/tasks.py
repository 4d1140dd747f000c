"""Task management page."""

from __future__ import annotations

from typing import Any, Dict, List

from bizconsole.exceptions import ApiError
from bizconsole.models.schemas import TASK_PRIORITIES, TaskDraft, TaskRecord
from gui.dialogs.form_flow import ConfirmDialogFlow, FormDialogFlow
from gui.services import employee_service, task_service
from gui.utils.logging import logger
from gui.views.base import BaseView

EMPTY_TASK = {
    "title": "",
    "description": "",
    "assigned_to": "",
    "priority": "Medium",
    "due_date": "",
}


class TaskManagementView(BaseView):
    name = "tasks"
    title = "Task Management"
    search_fields = ("id", "title", "assignee", "priority", "status")
    priorities = TASK_PRIORITIES

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.employees: List[Dict[str, Any]] = []
        options = self.flow_options()
        self.task_dialog = FormDialogFlow(
            "task",
            TaskDraft,
            save=lambda draft, editing: task_service.save_task(self.client, draft, editing),
            on_saved=self.upsert_saved,
            defaults=EMPTY_TASK,
            failure_message="Failed to save task.",
            success_message="Task created successfully!",
            updated_message="Task updated successfully!",
            **options,
        )
        self.delete_dialog = ConfirmDialogFlow(
            "task-delete",
            action=lambda record: task_service.delete_task(self.client, record),
            on_done=self.remove_row,
            failure_message="Failed to delete task.",
            success_message="Task deleted.",
            **options,
        )

    def dialogs(self):
        return (self.task_dialog, self.delete_dialog)

    def fetch(self):
        try:
            self.employees = employee_service.fetch_employees(self.client, self.settings.company_id)
        except ApiError as exc:
            logger.warning("Failed to load employees: %s", exc)
            self.employees = []
        return task_service.fetch_tasks(self.client)

    def new_task(self) -> int:
        return self.task_dialog.open_add()

    def edit_task(self, record: TaskRecord) -> int:
        values = record.model_dump(include={"title", "description", "assigned_to", "priority", "due_date"})
        return self.task_dialog.open_edit(record, values)

    def confirm_delete(self, record: TaskRecord) -> int:
        return self.delete_dialog.open_for(record)

    def display_rows(self) -> List[Dict[str, Any]]:
        return [
            {
                **row.model_dump(),
                "assignee": employee_service.employee_name(self.employees, row.assigned_to),
            }
            for row in self.rows
        ]
