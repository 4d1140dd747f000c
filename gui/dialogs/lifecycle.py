"""Modal dialog lifecycle.

A dialog is hidden the moment it is closed, but it is only removed from the
view tree once its exit transition has finished. ``DialogLifecycleController``
tracks that gap:

    CLOSED --open()--> OPEN --close()--> CLOSING --after_close()--> CLOSED

* ``open()`` and an effective ``close()`` both bump ``remount_token`` so the
  view layer rebuilds the dialog from scratch on every show.
* ``close()`` while already CLOSING (or CLOSED) does nothing.
* ``after_close()`` is the only place the caller's draft and selection are
  reset. A late signal from a cycle that has since been re-opened is ignored.

The controller performs no I/O and never raises on misuse.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from gui.utils.async_tasks import UiEventLoop
from gui.utils.logging import logger


class DialogPhase(Enum):
    CLOSED = "closed"
    OPEN = "open"
    CLOSING = "closing"


@dataclass(frozen=True)
class DialogState:
    """Immutable view of a controller, suitable for binding."""

    phase: DialogPhase
    remount_token: int

    @property
    def visible(self) -> bool:
        return self.phase is DialogPhase.OPEN

    @property
    def is_closing(self) -> bool:
        return self.phase is DialogPhase.CLOSING


class DialogLifecycleController:
    """Open/close bookkeeping for one dialog instance.

    Args:
        name: Used in the mount key and in log lines.
        on_reset: Clears the caller's FormDraft / PendingSelection. Runs from
            ``after_close`` only.
        on_open: Receives the optional payload given to ``open``.
    """

    def __init__(
        self,
        name: str = "dialog",
        on_reset: Optional[Callable[[], Any]] = None,
        on_open: Optional[Callable[[Any], Any]] = None,
    ):
        self.name = name
        self._on_reset = on_reset
        self._on_open = on_open
        self._phase = DialogPhase.CLOSED
        self._token = 0
        # token issued by the close() whose exit transition is pending
        self._closing_token: Optional[int] = None

    def __repr__(self) -> str:
        return f"DialogLifecycleController({self.name!r}, {self._phase.value}, token={self._token})"

    @property
    def phase(self) -> DialogPhase:
        return self._phase

    @property
    def visible(self) -> bool:
        return self._phase is DialogPhase.OPEN

    @property
    def is_closing(self) -> bool:
        return self._phase is DialogPhase.CLOSING

    @property
    def remount_token(self) -> int:
        return self._token

    @property
    def mount_key(self) -> str:
        return f"{self.name}-{self._token}"

    def snapshot(self) -> DialogState:
        return DialogState(phase=self._phase, remount_token=self._token)

    def open(self, payload: Any = None) -> int:
        """Show the dialog with a fresh mount. Re-opening an open dialog is allowed."""
        self._closing_token = None
        self._token += 1
        self._phase = DialogPhase.OPEN
        if self._on_open is not None:
            self._on_open(payload)
        logger.debug("%s opened (token=%s)", self.name, self._token)
        return self._token

    def close(self) -> bool:
        """Hide the dialog. Returns False when no close was started."""
        if self._phase is not DialogPhase.OPEN:
            return False
        self._phase = DialogPhase.CLOSING
        self._token += 1
        self._closing_token = self._token
        logger.debug("%s closing (token=%s)", self.name, self._token)
        return True

    def after_close(self, token: Optional[int] = None) -> bool:
        """Settle a close once the exit transition has finished.

        ``token`` is the value of ``remount_token`` right after the close that
        scheduled this signal. Returns True when the reset callback ran.
        """
        if self._phase is DialogPhase.OPEN:
            logger.debug("%s ignoring stale exit signal (token=%s)", self.name, token)
            return False
        if token is not None and token != self._closing_token:
            logger.debug("%s ignoring exit signal for token %s", self.name, token)
            return False
        try:
            if self._on_reset is not None:
                self._on_reset()
        finally:
            self._phase = DialogPhase.CLOSED
            self._closing_token = None
        return True


class ExitTransition:
    """Connects a controller's ``close`` to the environment's exit signal.

    With a loop and a positive duration, ``after_close`` fires once the
    transition time has elapsed on the loop. Otherwise there is no animation
    host and the close settles synchronously.
    """

    def __init__(
        self,
        controller: DialogLifecycleController,
        loop: Optional[UiEventLoop] = None,
        duration_ms: int = 0,
    ):
        self.controller = controller
        self.loop = loop
        self.duration_ms = duration_ms

    def close(self) -> bool:
        if not self.controller.close():
            return False
        token = self.controller.remount_token
        if self.loop is None or self.duration_ms <= 0:
            self.controller.after_close(token)
        else:
            self.loop.call_later(self.duration_ms, lambda: self.controller.after_close(token))
        return True
