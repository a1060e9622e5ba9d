from __future__ import annotations

import threading
import time
from collections.abc import Callable

# Epoch milliseconds stay 13 digits until the year 2286, so zero-padding keeps
# lexical order equal to numeric order.
_ID_WIDTH = 13


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class RecordIdGenerator:
    """Millisecond-clock ids that stay unique and increasing within a session."""

    def __init__(self, clock_ms: Callable[[], int] = _now_ms) -> None:
        self._clock_ms = clock_ms
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            candidate = max(self._clock_ms(), self._last + 1)
            self._last = candidate
        return str(candidate).zfill(_ID_WIDTH)
