"""Main console application object.

Holds the page views and the shared AppState. Switching pages closes any
dialog left open on the page being left, so a modal never follows the user
to another page.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from bizconsole.api_client import ApiClient
from bizconsole.config import Settings, get_settings
from gui.services.clients import get_api_client
from gui.state import AppState
from gui.utils.async_tasks import UiEventLoop
from gui.utils.logging import log
from gui.views.attendance import AttendanceView
from gui.views.base import BaseView
from gui.views.leave_requests import LeaveRequestsView
from gui.views.tasks import TaskManagementView
from gui.views.tickets import SupportTicketsView

PAGES = (SupportTicketsView, AttendanceView, LeaveRequestsView, TaskManagementView)


@dataclass
class ConsoleApp:
    """Console shell: a registry of views plus the active one."""

    state: AppState = field(default_factory=AppState)
    views: Dict[str, BaseView] = field(default_factory=dict)

    def register(self, view: BaseView) -> BaseView:
        self.views[view.name] = view
        return view

    @property
    def current(self) -> Optional[BaseView]:
        if self.state.current_view is None:
            return None
        return self.views.get(self.state.current_view)

    def switch_view(self, view_name: str) -> BaseView:
        """Switch the active view and load its rows."""
        if view_name not in self.views:
            raise KeyError(f"Unknown view: {view_name}")
        previous = self.current
        if previous is not None and previous.name != view_name:
            previous.close_dialogs()
        self.state.current_view = view_name
        view = self.views[view_name]
        log(f"Switched to {view_name}")
        view.load()
        return view

    def run(self, start_view: Optional[str] = None) -> None:
        """Load the first page. The host toolkit owns the actual event loop."""
        name = start_view or next(iter(self.views), None)
        if name is not None:
            self.switch_view(name)


def build_app(
    client: Optional[ApiClient] = None,
    loop: Optional[UiEventLoop] = None,
    settings: Optional[Settings] = None,
) -> ConsoleApp:
    """Create the console with every page registered."""
    settings = settings or get_settings()
    client = client or get_api_client(settings.api_base_url, settings.api_token)
    app = ConsoleApp()
    for page in PAGES:
        app.register(page(client, state=app.state, loop=loop, settings=settings))
    return app
