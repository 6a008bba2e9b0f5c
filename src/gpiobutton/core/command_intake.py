"""CommandIntake — drains the control topic in a daemon thread.

Every message is handed to a :class:`CommandHandler`.  The default
handler discards it; the control channel has no commands yet.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable

from gpiobutton.core.interfaces.bus import (
    BusMessage,
    CommandHandler,
    DiscardCommandHandler,
    MessageBusInterface,
    Topic,
)

_log = logging.getLogger(__name__)


class CommandIntake:
    """Consumes the control topic independently of the polling loop.

    The subscription is established synchronously in :meth:`start` so a
    subscribe failure surfaces as a startup error.  Consumption then runs
    in its own daemon thread until the shutdown signal is set or the
    stream is closed.

    Args:
        bus: Connected message bus.
        topic: Declared control topic.
        shutdown: Process-wide shutdown signal.
        handler: Receives each control message.
    """

    def __init__(
        self,
        bus: MessageBusInterface,
        topic: Topic,
        shutdown: threading.Event,
        handler: CommandHandler | None = None,
    ) -> None:
        self._bus = bus
        self._topic = topic
        self._shutdown = shutdown
        self._handler = handler or DiscardCommandHandler()
        self._thread: threading.Thread | None = None
        self.received = 0

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Subscribe and start the drain thread.

        Raises:
            TopologyError: If the subscription fails.
        """
        stream = self._bus.subscribe(self._topic, self._shutdown)
        self._thread = threading.Thread(
            target=self._drain, args=(stream,), name="command-intake", daemon=True,
        )
        self._thread.start()
        _log.info("Command intake listening on %s", self._topic.name)

    def join(self, timeout: float | None = None) -> None:
        if self._thread is None:
            return
        self._thread.join(timeout=timeout)
        if self._thread.is_alive():
            _log.warning("Command intake did not stop within %.1fs", timeout or 0.0)

    def _drain(self, stream: Iterable[BusMessage]) -> None:
        for message in stream:
            self.received += 1
            try:
                self._handler.handle(message)
            except Exception:
                _log.exception("Command handler failed on message from %s", message.topic)
        _log.info("Command intake stopped after %d messages", self.received)
