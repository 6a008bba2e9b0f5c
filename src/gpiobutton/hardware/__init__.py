"""Hardware abstraction: factory + platform backends (gpio, mock)."""

from gpiobutton.hardware.factory import create_input_line

__all__ = ["create_input_line"]
