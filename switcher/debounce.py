"""
Debounced search input.

Each keystroke supersedes the previous one: ``submit`` hands out a new
token and invalidates the pending run, and ``poll`` only releases the text
once no newer keystroke arrived within the quiet period. Nothing is queued;
the last input wins.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class _Pending:
    token: int
    text: str
    due_at: float


class SearchDebouncer:
    """
    Holds at most one pending search.

    Args:
        quiet_period_ms: Time without input before the search runs
        clock: Monotonic clock in seconds (injectable for tests)
    """

    def __init__(
        self,
        quiet_period_ms: int = 150,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.quiet_period = quiet_period_ms / 1000.0
        self.clock = clock
        self._token = 0
        self._pending: Optional[_Pending] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def submit(self, text: str) -> int:
        """Schedule a search for ``text``, replacing any pending one."""
        self._token += 1
        self._pending = _Pending(self._token, text, self.clock() + self.quiet_period)
        return self._token

    def is_current(self, token: int) -> bool:
        return self._pending is not None and self._pending.token == token

    def poll(self) -> Optional[str]:
        """Return the pending text once its quiet period has elapsed."""
        if self._pending is None or self.clock() < self._pending.due_at:
            return None
        text = self._pending.text
        self._pending = None
        return text

    def flush(self) -> Optional[str]:
        """Return the pending text immediately."""
        if self._pending is None:
            return None
        text = self._pending.text
        self._pending = None
        return text

    def cancel(self) -> None:
        self._pending = None
