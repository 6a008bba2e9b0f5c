"""Exception hierarchy.

Startup failures (:class:`HardwareError`, :class:`BusConnectionError`,
:class:`TopologyError`) are fatal.  :class:`InputReadError` and
:class:`PublishError` are raised per operation and handled by the loops
that issued them.
"""

from __future__ import annotations


class GPIOButtonError(Exception):
    """Base class for all gpiobutton errors."""


# --- Input line -----------------------------------------------------------

class HardwareError(GPIOButtonError):
    """The GPIO input line could not be acquired."""


class InputReadError(GPIOButtonError):
    """A single sample of the input line failed."""


# --- Message bus ----------------------------------------------------------

class BusError(GPIOButtonError):
    """Base class for message-bus failures."""


class BusConnectionError(BusError):
    """The broker is unreachable, refused the connection, or timed out."""


class TopologyError(BusError):
    """A topic could not be declared or subscribed to."""


class PublishError(BusError):
    """A single message could not be handed to the broker."""
