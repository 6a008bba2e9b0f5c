"""InMemoryBus — in-process broadcast bus for dev mode and tests.

Implements :class:`MessageBusInterface` with the same topology rules as
the MQTT backend: topics must be declared after :meth:`connect`, every
subscriber stream gets its own copy of each message.  Every accepted
publish is also recorded in :attr:`published` so tests can assert on it.
"""

from __future__ import annotations

import logging
import threading

from gpiobutton.bus.stream import MessageStream
from gpiobutton.core.errors import BusConnectionError, PublishError, TopologyError
from gpiobutton.core.interfaces.bus import BusMessage, MessageBusInterface, Topic

_log = logging.getLogger(__name__)


class InMemoryBus(MessageBusInterface):
    """Broadcast bus that never leaves the process.

    Attributes:
        published: Every message accepted by :meth:`publish`, in order.
        connected: ``True`` between :meth:`connect` and :meth:`close`.
    """

    def __init__(self, refuse_connection: bool = False) -> None:
        self._refuse_connection = refuse_connection
        self._lock = threading.Lock()
        self._topics: dict[str, Topic] = {}
        self._streams: dict[str, list[MessageStream]] = {}
        self._failures_pending = 0
        self.published: list[BusMessage] = []
        self.connected = False
        self.close_count = 0

    # -- Simulation helpers --

    def fail_next_publishes(self, count: int = 1) -> None:
        """Make the next *count* publishes raise :class:`PublishError`."""
        with self._lock:
            self._failures_pending = count

    def subscriber_count(self, topic_name: str) -> int:
        with self._lock:
            return len(self._streams.get(topic_name, []))

    # -- MessageBusInterface --

    def connect(self) -> None:
        if self._refuse_connection:
            raise BusConnectionError("In-memory broker refused the connection")
        self.connected = True
        _log.info("InMemoryBus connected")

    def declare_topic(self, name: str) -> Topic:
        if not self.connected:
            raise TopologyError(f"Cannot declare topic {name!r}: not connected")
        if not name or "+" in name or "#" in name:
            raise TopologyError(f"Invalid topic name {name!r}")
        with self._lock:
            return self._topics.setdefault(name, Topic(name))

    def publish(self, topic: Topic, content_type: str, payload: bytes) -> None:
        message = BusMessage(topic=topic.name, body=bytes(payload), content_type=content_type)
        with self._lock:
            if not self.connected:
                raise PublishError("Not connected")
            if topic.name not in self._topics:
                raise PublishError(f"Topic {topic.name!r} was never declared")
            if self._failures_pending > 0:
                self._failures_pending -= 1
                raise PublishError(f"Simulated publish failure on {topic.name!r}")
            self.published.append(message)
            streams = list(self._streams.get(topic.name, []))
        for stream in streams:
            stream.put(message)

    def subscribe(self, topic: Topic, shutdown: threading.Event) -> MessageStream:
        with self._lock:
            if topic.name not in self._topics:
                raise TopologyError(f"Cannot subscribe to undeclared topic {topic.name!r}")
            stream = MessageStream(shutdown, on_close=self._remove_stream)
            self._streams.setdefault(topic.name, []).append(stream)
        return stream

    def close(self) -> None:
        with self._lock:
            streams = [s for lst in self._streams.values() for s in lst]
            self._streams.clear()
            self.connected = False
            self.close_count += 1
        for stream in streams:
            stream.close()

    # -- Internal --

    def _remove_stream(self, stream: MessageStream) -> None:
        with self._lock:
            for name, streams in list(self._streams.items()):
                if stream in streams:
                    streams.remove(stream)
                if not streams:
                    del self._streams[name]
