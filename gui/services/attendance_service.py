"""Attendance CRUD helpers for the GUI."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from bizconsole.api_client import ApiClient
from bizconsole.exceptions import ApiError
from bizconsole.models.schemas import AttendanceDraft, AttendanceRecord
from gui.services.clients import as_list


def _clock(value: Optional[str]) -> str:
    """ISO timestamp -> ``HH:MM``; blank on anything unparseable."""
    if not value:
        return ""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).strftime("%H:%M")
    except ValueError:
        return ""


def to_record(item: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        id=item["id"],
        employee_id=item.get("employee_id"),
        date=(item.get("date") or "").split("T")[0],
        check_in=_clock(item.get("check_in_time")),
        check_out=_clock(item.get("check_out_time")),
        status=item.get("status") or "Present",
        notes=item.get("notes") or "",
    )


def fetch_attendance(client: ApiClient, company_id: Optional[str]) -> List[AttendanceRecord]:
    if not company_id:
        return []
    data = client.get(f"attendance/company/{company_id}")
    return [to_record(item) for item in as_list(data, "attendances", "data")]


def save_attendance(
    client: ApiClient,
    draft: AttendanceDraft,
    editing: Optional[AttendanceRecord] = None,
) -> AttendanceRecord:
    """Create (editing is None) or update an attendance record."""
    payload = draft.to_payload()
    if editing is None:
        data = client.post("attendance", payload)
    else:
        data = client.put(f"attendance/{editing.id}", payload)

    merged = {**payload, **(data if isinstance(data, dict) else {})}
    if "id" not in merged:
        if editing is None:
            raise ApiError("Server did not return the saved record")
        merged["id"] = editing.id
    return to_record(merged)


def delete_attendance(client: ApiClient, record: AttendanceRecord) -> None:
    client.delete(f"attendance/{record.id}")


def worked_hours(check_in: str, check_out: str) -> str:
    """Duration between two ``HH:MM`` clocks as ``Xh Ym``; negative spans keep a sign."""
    if not check_in or not check_out:
        return "–"
    h1, m1 = (int(part) for part in check_in.split(":")[:2])
    h2, m2 = (int(part) for part in check_out.split(":")[:2])
    total = (h2 * 60 + m2) - (h1 * 60 + m1)
    sign = "-" if total < 0 else ""
    hours, mins = divmod(abs(total), 60)
    return f"{sign}{hours}h {mins}m"
