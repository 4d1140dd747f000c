"""Support ticket helpers for the GUI."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from bizconsole.api_client import ApiClient
from bizconsole.exceptions import ApiError
from bizconsole.models.schemas import TicketDraft, TicketRecord
from gui.services.clients import as_list


def fetch_tickets(client: ApiClient) -> List[TicketRecord]:
    """Return tickets newest first."""
    rows = [TicketRecord.model_validate(item) for item in as_list(client.get("tickets"), "tickets", "data")]
    return sorted(rows, key=lambda t: (t.date or "", t.id), reverse=True)


def create_ticket(client: ApiClient, draft: TicketDraft, editing: Optional[TicketRecord] = None) -> TicketRecord:
    """Open a new ticket. Tickets cannot be edited once submitted."""
    if editing is not None:
        raise ApiError("Tickets cannot be edited")
    payload = {
        **draft.to_payload(),
        "status": "Open",
        "date": date.today().isoformat(),
    }
    data = client.post("tickets", payload)
    if not isinstance(data, dict) or "id" not in data:
        raise ApiError("Server did not return the new ticket")
    return TicketRecord.model_validate({**payload, **data})
