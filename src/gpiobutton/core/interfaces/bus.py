"""Message bus abstraction: topics, messages, and command handlers."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gpiobutton.bus.stream import MessageStream

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Topic:
    """Handle for a declared broadcast topic."""

    name: str


@dataclass(frozen=True)
class BusMessage:
    """A message received from (or recorded on) the bus."""

    topic: str
    body: bytes
    content_type: str | None = None


class MessageBusInterface(ABC):
    """Broker connection with broadcast publish / subscribe.

    Every topic is a broadcast destination: each subscriber receives its own
    copy of every message published after it subscribed.
    """

    @abstractmethod
    def connect(self) -> None:
        """Open the broker connection.

        Raises:
            BusConnectionError: If the broker cannot be reached.
        """

    @abstractmethod
    def declare_topic(self, name: str) -> Topic:
        """Declare the broadcast topic *name* and return its handle.

        Raises:
            TopologyError: If the topic cannot be declared.
        """

    @abstractmethod
    def publish(self, topic: Topic, content_type: str, payload: bytes) -> None:
        """Hand one message to the broker (at-most-once).

        Raises:
            PublishError: If the message could not be handed over.
        """

    @abstractmethod
    def subscribe(self, topic: Topic, shutdown: threading.Event) -> MessageStream:
        """Subscribe to *topic* with automatic acknowledgement.

        The returned stream stops yielding once *shutdown* is set.

        Raises:
            TopologyError: If the subscription cannot be established.
        """

    @abstractmethod
    def close(self) -> None:
        """Close the connection.  Safe to call more than once."""


class CommandHandler(ABC):
    """Receives every message arriving on the control topic."""

    @abstractmethod
    def handle(self, message: BusMessage) -> None:
        """Act on one control message."""


class DiscardCommandHandler(CommandHandler):
    """No commands are defined yet; control messages are consumed and dropped."""

    def handle(self, message: BusMessage) -> None:
        _log.debug(
            "Discarding control message on %s (%d bytes, content_type=%s)",
            message.topic,
            len(message.body),
            message.content_type,
        )
