"""Input line factory — picks the GPIO or Mock backend."""

from __future__ import annotations

import logging

from gpiobutton.core.interfaces.hardware import InputLineInterface
from gpiobutton.core.models.config import ButtonConfig

_log = logging.getLogger(__name__)


def create_input_line(config: ButtonConfig) -> InputLineInterface:
    """Return the input line for this process.

    * ``system.dev_mode`` → :class:`MockInputLine` (idle until driven).
    * otherwise → :class:`GPIOInputLine` on ``config.gpio_pin``.

    Raises:
        HardwareError: If the GPIO line cannot be opened.
    """
    if config.system.dev_mode:
        from gpiobutton.hardware.mock.mock_input import MockInputLine

        _log.info("Using MockInputLine (dev_mode=True)")
        return MockInputLine()

    from gpiobutton.hardware.gpio.gpio_input import GPIOInputLine, _setup_pin_factory

    _setup_pin_factory()
    return GPIOInputLine(config)
