"""Employee lookups shared by the payroll and task pages."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from bizconsole.api_client import ApiClient
from gui.services.clients import as_list


def fetch_employees(client: ApiClient, company_id: Optional[str]) -> List[Dict[str, Any]]:
    """Return ``{"id", "name"}`` options for employee dropdowns."""
    if not company_id:
        return []
    data = client.get("employee", params={"company_id": company_id})
    return [
        {
            "id": emp["id"],
            "name": emp.get("full_name") or emp.get("employee_code") or f"Employee {emp['id']}",
        }
        for emp in as_list(data, "employees", "data")
    ]


def employee_name(employees: Iterable[Dict[str, Any]], employee_id: Any) -> str:
    if employee_id is None or employee_id == "":
        return "–"
    for emp in employees:
        # ids arrive as ints from one endpoint and strings from form fields
        if str(emp["id"]) == str(employee_id):
            return emp["name"]
    return "–"
