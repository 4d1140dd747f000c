"""Application state container.

One ``AppState`` is created per console session and handed to every view;
there is no module-level instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Notification:
    message: str
    level: str = "info"


@dataclass
class AppState:
    """Holds ephemeral UI state."""

    current_view: Optional[str] = None
    status_message: str = "Ready"
    is_busy: bool = False
    notifications: List[Notification] = field(default_factory=list)

    def notify(self, message: str, level: str = "info") -> None:
        """Queue a non-blocking toast for the page chrome."""
        self.notifications.append(Notification(message=message, level=level))
        self.status_message = message

    def pop_notifications(self) -> List[Notification]:
        pending, self.notifications = self.notifications, []
        return pending
