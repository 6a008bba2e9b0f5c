"""LifecycleManager — startup & shutdown orchestration.

Startup order: input line → broker connection → topology (control topic,
events topic) → command intake → polling loop.  Every acquired resource is
registered on an :class:`~contextlib.ExitStack` as soon as it exists, so it
is released on every exit path, including a startup step that fails half way.
"""

from __future__ import annotations

import logging
import threading
import time
from contextlib import ExitStack
from dataclasses import dataclass
from typing import Callable

from gpiobutton.core.button_machine import ButtonStateMachine
from gpiobutton.core.command_intake import CommandIntake
from gpiobutton.core.event_publisher import EventPublisher
from gpiobutton.core.interfaces.bus import CommandHandler, MessageBusInterface, Topic
from gpiobutton.core.interfaces.hardware import InputLineInterface
from gpiobutton.core.models.config import ButtonConfig, TopicsConfig
from gpiobutton.core.press_poller import PressPoller

_log = logging.getLogger(__name__)

# Extra time granted to the intake thread beyond one polling interval.
_JOIN_SLACK_SECONDS = 1.0


@dataclass(frozen=True)
class Topology:
    """Broadcast topics declared once at startup."""

    control: Topic
    events: Topic


def declare_topology(bus: MessageBusInterface, topics: TopicsConfig) -> Topology:
    """Declare the control topic, then the events topic.

    Raises:
        TopologyError: If either declaration fails.
    """
    control = bus.declare_topic(topics.control)
    events = bus.declare_topic(topics.events)
    return Topology(control=control, events=events)


class LifecycleManager:
    """Top-level orchestrator: owns the shutdown signal and all resources.

    Args:
        config: Validated configuration.
        line_factory: Creates the input line (GPIO or mock), e.g.
            :func:`gpiobutton.hardware.factory.create_input_line`.
        bus_factory: Creates the (unconnected) message bus, e.g.
            :func:`gpiobutton.bus.factory.create_message_bus`.
        command_handler: Receives control messages; discards by default.
        clock: Monotonic nanosecond clock for press timing.
    """

    def __init__(
        self,
        config: ButtonConfig,
        line_factory: Callable[[ButtonConfig], InputLineInterface],
        bus_factory: Callable[[ButtonConfig], MessageBusInterface],
        command_handler: CommandHandler | None = None,
        clock: Callable[[], int] = time.monotonic_ns,
    ) -> None:
        self._config = config
        self._line_factory = line_factory
        self._bus_factory = bus_factory
        self._command_handler = command_handler
        self._clock = clock
        self._shutdown = threading.Event()
        self._shutdown_lock = threading.Lock()

        # Created during run()
        self._topology: Topology | None = None
        self._poller: PressPoller | None = None
        self._intake: CommandIntake | None = None

    # ------------------------------------------------------------------
    # Public properties
    # ------------------------------------------------------------------

    @property
    def shutdown_event(self) -> threading.Event:
        return self._shutdown

    @property
    def topology(self) -> Topology | None:
        """Declared topics (available once startup reached that step)."""
        return self._topology

    @property
    def poller(self) -> PressPoller | None:
        return self._poller

    @property
    def intake(self) -> CommandIntake | None:
        return self._intake

    # ------------------------------------------------------------------
    # Shutdown signal
    # ------------------------------------------------------------------

    def request_shutdown(self, reason: str = "user request") -> None:
        """Set the shutdown signal.  Later calls are no-ops."""
        with self._shutdown_lock:
            if self._shutdown.is_set():
                return
            _log.info("Shutdown requested: %s", reason)
            self._shutdown.set()

    def handle_signal(self, signum: int, frame: object) -> None:
        """``signal.signal`` handler for SIGINT.

        Runs on the main thread, which may be inside ``shutdown.wait()``
        holding the event's lock, so the signal is set from a helper thread.
        """
        threading.Thread(
            target=self.request_shutdown,
            args=(f"signal {signum}",),
            name="shutdown-request",
            daemon=True,
        ).start()

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Start everything and block until shutdown.

        Raises:
            HardwareError: If the input line cannot be acquired.
            BusConnectionError: If the broker cannot be reached.
            TopologyError: If a topic cannot be declared or subscribed to.
        """
        config = self._config
        interval = config.system.poll_interval

        with ExitStack() as stack:
            _log.info("Starting button %s on GPIO %d", config.button_name, config.gpio_pin)

            # 1. Input line
            line = self._line_factory(config)
            stack.callback(self._release, "input line", line.cleanup)

            # 2. Broker connection
            bus = self._bus_factory(config)
            stack.callback(self._release, "message bus", bus.close)
            bus.connect()

            # 3. Topology
            self._topology = declare_topology(bus, config.topics)

            # 4. Command intake (joined before the bus is closed)
            self._intake = CommandIntake(
                bus, self._topology.control, self._shutdown, self._command_handler
            )
            self._intake.start()
            stack.callback(self._intake.join, interval + _JOIN_SLACK_SECONDS)
            # Runs first on unwind, so the intake also stops on error paths.
            stack.callback(self._shutdown.set)

            # 5. Polling loop (blocks until shutdown)
            self._poller = PressPoller(
                line=line,
                machine=ButtonStateMachine(config.button_name, config.system.min_press_ms),
                publisher=EventPublisher(bus, self._topology.events),
                interval=interval,
                clock=self._clock,
            )
            _log.info("Button %s running (Ctrl-C to stop)", config.button_name)
            self._poller.run(self._shutdown)

        _log.info("Button %s stopped", config.button_name)

    @staticmethod
    def _release(name: str, release: Callable[[], None]) -> None:
        try:
            release()
        except Exception:
            _log.exception("Error releasing %s", name)
        else:
            _log.debug("Released %s", name)
