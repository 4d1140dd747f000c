"""Async helpers.

The console runs on a single cooperative event loop. Network calls and exit
transitions are queued on a ``UiEventLoop`` and resume via callbacks, so
there is never more than one handler running at a time.

The loop keeps virtual time in milliseconds. A host toolkit pumps it (for
example from a tkinter ``after`` tick); tests drive it directly with
``advance`` and ``run_pending``.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Any, Callable, List, Tuple

from gui.utils.logging import logger


def run_async(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Run ``fn`` right away; used where no loop is wired (scripts, tests)."""
    return fn(*args, **kwargs)


class UiEventLoop:
    """Deterministic single-threaded scheduler with virtual time."""

    def __init__(self) -> None:
        self.now_ms = 0
        self._queue: List[Tuple[int, int, Callable[[], Any]]] = []
        self._seq = itertools.count()

    def __len__(self) -> int:
        return len(self._queue)

    def call_soon(self, callback: Callable[[], Any]) -> None:
        self.call_later(0, callback)

    def call_later(self, delay_ms: int, callback: Callable[[], Any]) -> None:
        heapq.heappush(self._queue, (self.now_ms + max(0, delay_ms), next(self._seq), callback))

    def run_pending(self) -> int:
        """Run every callback that is due now, including ones queued while running."""
        ran = 0
        while self._queue and self._queue[0][0] <= self.now_ms:
            _, _, callback = heapq.heappop(self._queue)
            callback()
            ran += 1
        return ran

    def advance(self, ms: int) -> int:
        """Move virtual time forward, firing callbacks in due order.

        Time never runs backwards; a negative span fires what is already due.
        """
        target = self.now_ms + max(0, ms)
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            self.now_ms = max(self.now_ms, self._queue[0][0])
            ran += self.run_pending()
        self.now_ms = target
        return ran

    def drain(self) -> int:
        """Run until the queue is empty, jumping time as needed."""
        ran = 0
        while self._queue:
            self.now_ms = max(self.now_ms, self._queue[0][0])
            ran += self.run_pending()
        return ran

    def submit_request(
        self,
        fn: Callable[[], Any],
        on_success: Callable[[Any], Any],
        on_error: Callable[[Exception], Any],
        errors: Tuple[type, ...] = (Exception,),
    ) -> None:
        """Issue ``fn`` on a later turn and route its outcome to a callback.

        Only exceptions listed in ``errors`` are delivered to ``on_error``;
        anything else propagates out of the loop.
        """

        def _run() -> None:
            try:
                result = fn()
            except errors as exc:
                logger.debug("Request %r failed: %s", getattr(fn, "__name__", fn), exc)
                on_error(exc)
                return
            on_success(result)

        self.call_soon(_run)
