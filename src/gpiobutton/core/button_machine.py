"""ButtonStateMachine — turns line samples into discrete press events.

States are ``IDLE`` and ``PRESSED``.  A rising edge (sample ``True`` while
idle) records the press start; a falling edge (sample ``False`` while
pressed) yields one :class:`PressEvent` with the elapsed time truncated to
whole milliseconds.  Every other sample/state combination is a no-op.

Duration resolution is bounded by the polling interval.  No debouncing is
applied; ``min_press_ms`` optionally discards presses shorter than a
threshold.
"""

from __future__ import annotations

import logging

from gpiobutton.core.models.event import PressEvent
from gpiobutton.core.models.state import ButtonState

_log = logging.getLogger(__name__)


class ButtonStateMachine:
    """Press/release edge detector for one button.

    Only the polling thread may call :meth:`feed`.

    Args:
        button_name: Name carried by every emitted event.
        min_press_ms: Presses shorter than this are dropped (0 disables).
    """

    def __init__(self, button_name: str, min_press_ms: int = 0) -> None:
        self._button_name = button_name
        self._min_press_ms = min_press_ms
        self._state = ButtonState.IDLE
        self._press_start: int | None = None

    @property
    def button_name(self) -> str:
        return self._button_name

    @property
    def state(self) -> ButtonState:
        return self._state

    @property
    def press_start(self) -> int | None:
        """Monotonic timestamp (ns) of the open press, ``None`` while idle."""
        return self._press_start

    def feed(self, pressed: bool, now: int) -> PressEvent | None:
        """Apply one sample taken at monotonic time *now* (nanoseconds).

        Returns:
            The completed :class:`PressEvent` on a falling edge, else ``None``.
        """
        if pressed and self._state is ButtonState.IDLE:
            self._state = ButtonState.PRESSED
            self._press_start = now
            _log.debug("Button %s pressed", self._button_name)
            return None

        if not pressed and self._state is ButtonState.PRESSED:
            assert self._press_start is not None
            elapsed_ns = max(0, now - self._press_start)
            self._state = ButtonState.IDLE
            self._press_start = None

            duration_ms = elapsed_ns // 1_000_000
            if duration_ms < self._min_press_ms:
                _log.debug(
                    "Button %s press of %d ms below threshold %d ms, ignored",
                    self._button_name,
                    duration_ms,
                    self._min_press_ms,
                )
                return None
            return PressEvent(button_name=self._button_name, duration_ms=duration_ms)

        return None
