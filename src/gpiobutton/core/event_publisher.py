"""EventPublisher — hands press events to the message bus, at most once."""

from __future__ import annotations

import logging as _logging

from gpiobutton.core.interfaces.bus import MessageBusInterface, Topic
from gpiobutton.core.models.event import PressEvent
from gpiobutton.logging.logger import ContextualLogger

_log = _logging.getLogger(__name__)


class EventPublisher:
    """Serialises :class:`PressEvent` objects onto the events topic.

    Publishing is fire-and-forget: a failure is logged and the event is
    dropped.  There is no retry and no local buffer, and :meth:`publish`
    never raises into the polling loop.

    Args:
        bus: Connected message bus.
        topic: Declared events topic.
    """

    def __init__(self, bus: MessageBusInterface, topic: Topic) -> None:
        self._bus = bus
        self._topic = topic
        self.sent = 0
        self.dropped = 0

    def publish(self, event: PressEvent) -> bool:
        """Publish *event*; return ``True`` if the bus accepted it."""
        log = ContextualLogger(_log, button=event.button_name)
        try:
            self._bus.publish(self._topic, event.content_type, event.to_payload())
        except Exception:
            self.dropped += 1
            log.exception(
                "Dropped press of %d ms on %s", event.duration_ms, self._topic.name
            )
            return False

        self.sent += 1
        log.info("Sent button press %s (%d ms)", event.content_type, event.duration_ms)
        return True
