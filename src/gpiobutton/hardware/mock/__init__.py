"""Mock hardware backend for development and testing."""

from gpiobutton.hardware.mock.mock_input import MockInputLine

__all__ = ["MockInputLine"]
