"""Capability interfaces: input line, message bus, command handler."""

from gpiobutton.core.interfaces.bus import (
    BusMessage,
    CommandHandler,
    DiscardCommandHandler,
    MessageBusInterface,
    Topic,
)
from gpiobutton.core.interfaces.hardware import InputLineInterface

__all__ = [
    "BusMessage",
    "CommandHandler",
    "DiscardCommandHandler",
    "InputLineInterface",
    "MessageBusInterface",
    "Topic",
]
