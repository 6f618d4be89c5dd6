"""Wall-clock helpers working in milliseconds."""

from __future__ import annotations

import time

_POLL_SECONDS = 0.0005


def now_ms() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def sleep_ms(duration: int) -> None:
    """Wait for at least ``duration`` milliseconds, polling in short naps."""
    start = now_ms()
    while now_ms() - start < duration:
        time.sleep(_POLL_SECONDS)