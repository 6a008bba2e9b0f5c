"""GPIO input line backed by ``gpiozero``.

The pin factory is set to ``LGPIOFactory`` when the ``lgpio`` bindings are
installed, otherwise gpiozero picks its default.  Tests patch
``gpiobutton.hardware.gpio.gpio_input.DigitalInputDevice`` so they run on
any platform.
"""

from __future__ import annotations

import logging as _logging

from gpiozero import DigitalInputDevice  # type: ignore[import-untyped]
from gpiozero.exc import GPIOZeroError  # type: ignore[import-untyped]

from gpiobutton.core.errors import HardwareError, InputReadError
from gpiobutton.core.interfaces.hardware import InputLineInterface
from gpiobutton.core.models.config import ButtonConfig

_log = _logging.getLogger(__name__)


def _setup_pin_factory() -> None:
    """Configure gpiozero to use ``LGPIOFactory`` (for Pi 5 compat)."""
    try:
        from gpiozero import Device  # type: ignore[import-untyped]
        from gpiozero.pins.lgpio import LGPIOFactory  # type: ignore[import-untyped]

        Device.pin_factory = LGPIOFactory()
        _log.info("gpiozero pin factory set to LGPIOFactory")
    except (ImportError, GPIOZeroError, OSError):
        _log.warning(
            "LGPIOFactory not available, using gpiozero default pin factory"
        )


class GPIOInputLine(InputLineInterface):
    """Push-button line read through ``gpiozero.DigitalInputDevice``.

    With ``pull_up=True`` gpiozero inverts the logic level, so
    :meth:`sample` always reports ``True`` while the button is held.

    Raises:
        HardwareError: If the pin cannot be claimed.
    """

    def __init__(self, config: ButtonConfig) -> None:
        self._pin = config.gpio_pin
        try:
            self._device = DigitalInputDevice(self._pin, pull_up=config.hardware.pull_up)
        except (GPIOZeroError, OSError) as exc:
            raise HardwareError(f"Cannot open GPIO line {self._pin}: {exc}") from exc

        _log.info(
            "GPIOInputLine initialised on pin %d (pull_up=%s, i2c=0x%02x lane %d)",
            self._pin,
            config.hardware.pull_up,
            config.i2c_address,
            config.i2c_lane,
        )

    def sample(self) -> bool:
        try:
            return bool(self._device.is_active)
        except (GPIOZeroError, OSError) as exc:
            raise InputReadError(f"Read of GPIO line {self._pin} failed: {exc}") from exc

    def cleanup(self) -> None:
        if self._device is not None:
            self._device.close()
            self._device = None
        _log.debug("GPIOInputLine on pin %d cleaned up", self._pin)
