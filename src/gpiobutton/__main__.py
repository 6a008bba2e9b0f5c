"""Allow ``python -m gpiobutton <config file>``."""

from gpiobutton.main import run

run()
