"""Runtime state enumerations."""

from __future__ import annotations

from enum import Enum


class ButtonState(str, Enum):
    """Position of the button as tracked by the press-detection state machine."""

    IDLE = "idle"
    PRESSED = "pressed"
