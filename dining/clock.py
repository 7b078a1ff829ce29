"""Millisecond wall-clock helpers."""

import time

_POLL_SECONDS = 0.0005


def now() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def msleep(ms: int) -> None:
    """Sleep for at least ``ms`` milliseconds, polling in short steps for accuracy."""
    start = now()
    while now() - start < ms:
        time.sleep(_POLL_SECONDS)