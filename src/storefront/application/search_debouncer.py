"""Search debouncing.

Keystrokes arrive far faster than the backend should be queried.  The
debouncer holds at most one pending timer: every new input cancels the
previous timer and starts the quiet period again, so a burst of typing
produces a single search with the last text typed.

    Idle --schedule--> Pending --schedule--> Pending (timer replaced)
    Pending --quiet period elapses--> Idle (search fired)
    Pending --cancel--> Idle (nothing fired)

A search that has already fired runs to completion; only pending
timers can be cancelled.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

DEFAULT_QUIET_PERIOD = 0.5  # seconds


class DebounceState(Enum):
    IDLE = "IDLE"
    PENDING = "PENDING"


@dataclass(frozen=True)
class DebounceTimer:
    """The single scheduled search and the text it will search for."""

    handle: asyncio.TimerHandle
    text: str


class SearchDebouncer:

    def __init__(
        self,
        action: Callable[[str], Awaitable[None]],
        quiet_period: float = DEFAULT_QUIET_PERIOD,
    ) -> None:
        self._action = action
        self._quiet_period = quiet_period
        self._timer: DebounceTimer | None = None
        self._in_flight: set[asyncio.Task[None]] = set()

    @property
    def state(self) -> DebounceState:
        return DebounceState.PENDING if self._timer is not None else DebounceState.IDLE

    @property
    def pending_text(self) -> str | None:
        return self._timer.text if self._timer is not None else None

    def schedule(self, text: str) -> None:
        """Restart the quiet period; search for *text* if nothing follows.

        Must be called from inside a running event loop.
        """
        loop = asyncio.get_running_loop()
        self.cancel()
        handle = loop.call_later(self._quiet_period, self._fire, text)
        self._timer = DebounceTimer(handle=handle, text=text)

    def cancel(self) -> None:
        """Drop the pending timer, if any.  Fired searches are unaffected."""
        if self._timer is not None:
            self._timer.handle.cancel()
            self._timer = None

    async def join(self) -> None:
        """Wait for every search that has already fired."""
        while self._in_flight:
            await asyncio.gather(*self._in_flight)

    # --- Internal helpers -----------------------------------------------------

    def _fire(self, text: str) -> None:
        self._timer = None
        logger.debug("Debounced search fired: %r", text)
        task = asyncio.ensure_future(self._action(text))
        self._in_flight.add(task)
        task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Task[None]) -> None:
        self._in_flight.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Debounced search failed", exc_info=task.exception())
