"""Leave request CRUD helpers for the GUI."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from bizconsole.api_client import ApiClient
from bizconsole.exceptions import ApiError
from bizconsole.models.schemas import LeaveDraft, LeaveRecord
from gui.services.clients import as_list


def to_record(item: Dict[str, Any]) -> LeaveRecord:
    return LeaveRecord(
        id=item["id"],
        employee_id=item.get("employee_id"),
        leave_type_id=item.get("leave_type_id"),
        from_date=(item.get("from_date") or "").split("T")[0],
        to_date=(item.get("to_date") or "").split("T")[0],
        total_days=item.get("total_days") or 0,
        reason=item.get("reason") or "",
        status=item.get("status") or "Pending",
    )


def fetch_leaves(client: ApiClient, company_id: Optional[str]) -> List[LeaveRecord]:
    if not company_id:
        return []
    data = client.get(f"leaveRequest/company/{company_id}")
    return [to_record(item) for item in as_list(data, "leaveRequests", "data")]


def fetch_leave_types(client: ApiClient) -> List[Dict[str, Any]]:
    return [
        {"id": item["id"], "name": item.get("name") or item.get("leave_type") or f"Type {item['id']}"}
        for item in as_list(client.get("leaveType"), "leaveTypes", "data")
    ]


def save_leave(client: ApiClient, draft: LeaveDraft, editing: Optional[LeaveRecord] = None) -> LeaveRecord:
    payload = draft.to_payload()
    if editing is None:
        data = client.post("leaveRequest/request", payload)
    else:
        data = client.patch(f"leaveRequest/request/{editing.id}", payload)

    merged = {**payload, **(data if isinstance(data, dict) else {})}
    if "id" not in merged:
        if editing is None:
            raise ApiError("Server did not return the saved leave request")
        merged["id"] = editing.id
    return to_record(merged)


def delete_leave(client: ApiClient, record: LeaveRecord) -> None:
    client.delete(f"leaveRequest/request/{record.id}")
