"""MessageStream — queue-backed iterator over messages of one subscription."""

from __future__ import annotations

import queue
import threading
from typing import Callable, Iterator

from gpiobutton.core.interfaces.bus import BusMessage


class MessageStream:
    """Iterable of :class:`BusMessage` fed from a broker callback thread.

    Iteration ends when the shutdown signal is set, checked at least every
    *poll_timeout* seconds so a consumer never blocks indefinitely on a
    quiet topic.  After :meth:`close`, messages queued before the close are
    still delivered, then iteration ends.

    Args:
        shutdown: Process-wide shutdown signal.
        poll_timeout: Max seconds to block waiting for the next message.
        on_close: Called once with this stream when it is closed.
    """

    def __init__(
        self,
        shutdown: threading.Event,
        poll_timeout: float = 0.1,
        on_close: Callable[[MessageStream], None] | None = None,
    ) -> None:
        self._queue: queue.Queue[BusMessage | None] = queue.Queue()
        self._shutdown = shutdown
        self._poll_timeout = poll_timeout
        self._closed = threading.Event()
        self._on_close = on_close

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def put(self, message: BusMessage) -> None:
        """Enqueue *message* (called by the bus backend).  Ignored once closed."""
        if not self._closed.is_set():
            self._queue.put(message)

    def close(self) -> None:
        if self._closed.is_set():
            return
        self._closed.set()
        self._queue.put(None)  # wake a blocked consumer
        if self._on_close is not None:
            self._on_close(self)

    def __iter__(self) -> Iterator[BusMessage]:
        while not self._shutdown.is_set():
            try:
                message = self._queue.get(timeout=self._poll_timeout)
            except queue.Empty:
                continue
            if message is None:
                break
            yield message
