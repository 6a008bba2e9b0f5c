"""Mock input line for development and testing.

Implements :class:`InputLineInterface` with in-memory state and
``simulate_*()`` helpers.
"""

from __future__ import annotations

import logging
import threading

from gpiobutton.core.errors import InputReadError
from gpiobutton.core.interfaces.hardware import InputLineInterface

_log = logging.getLogger(__name__)


class MockInputLine(InputLineInterface):
    """In-memory button line, safe to drive from any thread.

    Attributes:
        read_count: Number of :meth:`sample` calls so far (including failures).
    """

    def __init__(self, pressed: bool = False) -> None:
        self._lock = threading.Lock()
        self._pressed = pressed
        self._pending_errors = 0
        self.read_count = 0
        self.cleaned_up = False

    def sample(self) -> bool:
        with self._lock:
            self.read_count += 1
            if self._pending_errors > 0:
                self._pending_errors -= 1
                raise InputReadError("Simulated GPIO read failure")
            return self._pressed

    def cleanup(self) -> None:
        self.cleaned_up = True

    # -- Simulation helpers --

    def simulate_press(self) -> None:
        """Hold the button down until :meth:`simulate_release`."""
        with self._lock:
            self._pressed = True

    def simulate_release(self) -> None:
        with self._lock:
            self._pressed = False

    def simulate_read_error(self, count: int = 1) -> None:
        """Make the next *count* samples raise :class:`InputReadError`."""
        with self._lock:
            self._pending_errors = count
