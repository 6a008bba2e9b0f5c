"""Hardware abstraction interface for the button input line.

The GPIO and Mock backends both implement :class:`InputLineInterface`,
so the press-detection loop runs unchanged against real hardware,
the dev-mode line, and scripted lines in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class InputLineInterface(ABC):
    """A single digital input line wired to a momentary push-button."""

    @abstractmethod
    def sample(self) -> bool:
        """Return ``True`` while the button is held down.

        Raises:
            InputReadError: If the line could not be read this time.
        """

    def cleanup(self) -> None:
        """Release the line.  No-op by default (mock)."""
