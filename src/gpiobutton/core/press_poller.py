"""PressPoller — the polling / publish loop."""

from __future__ import annotations

import logging as _logging
import threading
import time
from typing import Callable

from gpiobutton.core.button_machine import ButtonStateMachine
from gpiobutton.core.errors import InputReadError
from gpiobutton.core.event_publisher import EventPublisher
from gpiobutton.core.interfaces.hardware import InputLineInterface
from gpiobutton.core.models.event import PressEvent
from gpiobutton.logging.logger import ContextualLogger

_log = _logging.getLogger(__name__)


class PressPoller:
    """Samples the input line once per interval and publishes completed presses.

    Each iteration first waits one *interval* on the shutdown signal, then
    takes one sample.  A failed read skips the tick without touching the
    state machine.  Once the signal is set the loop returns without issuing
    another read; a press still open at that point is abandoned.

    Args:
        line: Input line to sample.
        machine: Edge detector (owned exclusively by this poller).
        publisher: Destination for completed presses.
        interval: Seconds between samples.
        clock: Monotonic clock in nanoseconds, injectable for tests.
    """

    def __init__(
        self,
        line: InputLineInterface,
        machine: ButtonStateMachine,
        publisher: EventPublisher,
        interval: float = 0.1,
        clock: Callable[[], int] = time.monotonic_ns,
    ) -> None:
        self._line = line
        self._machine = machine
        self._publisher = publisher
        self._interval = interval
        self._clock = clock
        self._log = ContextualLogger(_log, button=machine.button_name)
        self._read_failures = 0
        self.ticks = 0

    @property
    def read_failures(self) -> int:
        return self._read_failures

    def tick(self) -> PressEvent | None:
        """Take one sample; publish and return the event if a press completed."""
        self.ticks += 1
        try:
            pressed = self._line.sample()
        except InputReadError as exc:
            self._read_failures += 1
            if self._read_failures == 1:
                self._log.warning("GPIO read failed, skipping tick: %s", exc)
            else:
                self._log.debug("GPIO read failed, skipping tick: %s", exc)
            return None

        event = self._machine.feed(pressed, self._clock())
        if event is not None:
            self._publisher.publish(event)
        return event

    def run(self, shutdown: threading.Event) -> None:
        """Poll until *shutdown* is set.  Blocks the calling thread."""
        self._log.info("Polling input line every %.0f ms", self._interval * 1000)
        while not shutdown.wait(self._interval):
            self.tick()

        if self._machine.press_start is not None:
            self._log.info("Shutdown during an open press, no event emitted")
        self._log.info(
            "Polling stopped after %d ticks (%d failed reads)",
            self.ticks,
            self._read_failures,
        )
