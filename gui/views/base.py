"""Base class for page views.

A view owns the rows it fetched, the dialog flows that edit them, and the
client-side search/pagination over those rows. Rendering is left to whatever
toolkit binds to it.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Optional

from bizconsole.api_client import ApiClient
from bizconsole.config import Settings, get_settings
from bizconsole.exceptions import ApiError
from gui.dialogs.form_flow import DialogFlow
from gui.state import AppState
from gui.utils.async_tasks import UiEventLoop
from gui.utils.logging import logger


class BaseView:
    name: str = "base"
    title: str = ""
    search_fields: tuple = ()

    def __init__(
        self,
        client: ApiClient,
        state: Optional[AppState] = None,
        loop: Optional[UiEventLoop] = None,
        settings: Optional[Settings] = None,
    ):
        self.client = client
        self.state = state or AppState()
        self.loop = loop
        self.settings = settings or get_settings()
        self.rows: List[Any] = []
        self.loading = False
        self.load_error: Optional[str] = None

    # -- dialogs ------------------------------------------------------------

    def flow_options(self) -> Dict[str, Any]:
        return {
            "loop": self.loop,
            "transition_ms": self.settings.exit_transition_ms,
            "notify": self.notify_error,
            "notify_info": self.notify_info,
        }

    def dialogs(self) -> Iterable[DialogFlow]:
        return ()

    def close_dialogs(self) -> None:
        for flow in self.dialogs():
            flow.close()

    def notify_error(self, message: str) -> None:
        self.state.notify(message, level="error")

    def notify_info(self, message: str) -> None:
        self.state.notify(message, level="info")

    # -- data ---------------------------------------------------------------

    def fetch(self) -> List[Any]:
        raise NotImplementedError

    def load(self) -> bool:
        """Fetch rows from the backend. Returns False (and notifies) on failure."""
        self.loading = True
        self.load_error = None
        try:
            self.rows = list(self.fetch())
            return True
        except ApiError as exc:
            logger.error("Failed to load %s: %s", self.name, exc)
            self.load_error = f"Failed to load {self.title or self.name}"
            self.notify_error(self.load_error)
            self.rows = []
            return False
        finally:
            self.loading = False

    def insert_row(self, row: Any, front: bool = False) -> None:
        if front:
            self.rows.insert(0, row)
        else:
            self.rows.append(row)

    def replace_row(self, row: Any) -> None:
        for idx, existing in enumerate(self.rows):
            if existing.id == row.id:
                self.rows[idx] = row
                return
        self.rows.append(row)

    def remove_row(self, row: Any) -> None:
        self.rows = [existing for existing in self.rows if existing.id != row.id]

    def upsert_saved(self, row: Any, editing: Optional[Any]) -> None:
        if editing is None:
            self.insert_row(row)
        else:
            self.replace_row(row)

    # -- presentation -------------------------------------------------------

    def display_rows(self) -> List[Dict[str, Any]]:
        return [row.model_dump() for row in self.rows]

    def search(self, text: str) -> List[Dict[str, Any]]:
        rows = self.display_rows()
        needle = (text or "").strip().lower()
        if not needle:
            return rows
        return [
            row for row in rows
            if any(needle in str(row.get(f, "")).lower() for f in self.search_fields)
        ]

    @staticmethod
    def paginate(rows: List[Any], page: int, per_page: int = 10) -> List[Any]:
        """1-based page slice; out-of-range pages are empty."""
        if page < 1 or per_page < 1:
            return []
        start = (page - 1) * per_page
        return rows[start:start + per_page]

    @staticmethod
    def page_count(rows: List[Any], per_page: int = 10) -> int:
        return max(1, math.ceil(len(rows) / per_page)) if per_page > 0 else 1
