"""Logging setup and contextual logger."""

from gpiobutton.logging.logger import ContextualLogger, setup_logging

__all__ = ["setup_logging", "ContextualLogger"]
