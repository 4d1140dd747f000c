"""Support tickets page."""

from __future__ import annotations

from typing import Any

from bizconsole.models.schemas import TicketDraft
from gui.dialogs.form_flow import FormDialogFlow
from gui.services import tickets_service
from gui.views.base import BaseView

EMPTY_TICKET = {"subject": "", "message": ""}


class SupportTicketsView(BaseView):
    name = "tickets"
    title = "Support Tickets"
    search_fields = ("subject", "message", "status")

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.ticket_dialog = FormDialogFlow(
            "ticket",
            TicketDraft,
            save=lambda draft, editing: tickets_service.create_ticket(self.client, draft, editing),
            on_saved=lambda row, _editing: self.insert_row(row, front=True),
            defaults=EMPTY_TICKET,
            failure_message="Could not submit ticket.",
            **self.flow_options(),
        )

    def dialogs(self):
        return (self.ticket_dialog,)

    def fetch(self):
        return tickets_service.fetch_tickets(self.client)

    def new_ticket(self) -> int:
        return self.ticket_dialog.open_add()

    def open_count(self) -> int:
        return sum(1 for t in self.rows if t.status == "Open")
