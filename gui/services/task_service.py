"""Task tracking CRUD helpers for the GUI."""

from __future__ import annotations

from typing import List, Optional

from bizconsole.api_client import ApiClient
from bizconsole.exceptions import ApiError
from bizconsole.models.schemas import TaskDraft, TaskRecord
from gui.services.clients import as_list


def fetch_tasks(client: ApiClient) -> List[TaskRecord]:
    return [TaskRecord.model_validate(item) for item in as_list(client.get("tasks"), "tasks", "data")]


def save_task(client: ApiClient, draft: TaskDraft, editing: Optional[TaskRecord] = None) -> TaskRecord:
    payload = draft.to_payload()
    if editing is None:
        payload["status"] = "Pending"
        data = client.post("tasks", payload)
    else:
        payload["status"] = editing.status
        data = client.put(f"tasks/{editing.id}", payload)

    merged = {**payload, **(data if isinstance(data, dict) else {})}
    if "id" not in merged:
        if editing is None:
            raise ApiError("Server did not return the new task")
        merged["id"] = editing.id
    return TaskRecord.model_validate(merged)


def delete_task(client: ApiClient, record: TaskRecord) -> None:
    client.delete(f"tasks/{record.id}")
