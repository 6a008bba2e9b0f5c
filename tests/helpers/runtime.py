"""Test helpers — wait utilities."""

from __future__ import annotations

import time
from typing import Callable


def wait_for_sync(
    condition: Callable[[], bool],
    timeout: float = 5.0,
    interval: float = 0.01,
) -> None:
    """Synchronous poll *condition* every *interval* seconds.

    Raises :class:`TimeoutError` if *condition* doesn't become truthy
    within *timeout* seconds.  Suitable for threaded tests.
    """
    deadline = time.monotonic() + timeout
    while not condition():
        if time.monotonic() >= deadline:
            raise TimeoutError(
                f"Condition not met within {timeout}s"
            )
        time.sleep(interval)
