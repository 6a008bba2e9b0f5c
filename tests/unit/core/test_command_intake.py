"""Tests for CommandIntake — control-topic drain thread."""

from __future__ import annotations

import pytest

from gpiobutton.core.command_intake import CommandIntake
from gpiobutton.core.errors import TopologyError
from gpiobutton.core.interfaces.bus import BusMessage, CommandHandler, DiscardCommandHandler, Topic
from tests.helpers.runtime import wait_for_sync


class _RecordingHandler(CommandHandler):
    def __init__(self, fail_on: bytes | None = None) -> None:
        self.messages: list[BusMessage] = []
        self._fail_on = fail_on

    def handle(self, message: BusMessage) -> None:
        if message.body == self._fail_on:
            raise RuntimeError("bad command")
        self.messages.append(message)


class TestCommandIntake:
    def test_messages_reach_handler(self, memory_bus, topology, shutdown):
        handler = _RecordingHandler()
        intake = CommandIntake(memory_bus, topology.control, shutdown, handler)
        intake.start()

        memory_bus.publish(topology.control, "text/plain", b"reset")
        wait_for_sync(lambda: len(handler.messages) == 1, timeout=2.0)

        assert handler.messages[0].body == b"reset"
        assert handler.messages[0].topic == "gpiobutton_ctrl"
        shutdown.set()
        intake.join(timeout=1.0)

    def test_default_handler_discards(self, memory_bus, topology, shutdown):
        intake = CommandIntake(memory_bus, topology.control, shutdown)
        intake.start()

        memory_bus.publish(topology.control, "text/plain", b"anything")
        wait_for_sync(lambda: intake.received == 1, timeout=2.0)

        shutdown.set()
        intake.join(timeout=1.0)
        assert not intake.is_running

    def test_handler_error_does_not_stop_intake(self, memory_bus, topology, shutdown):
        handler = _RecordingHandler(fail_on=b"boom")
        intake = CommandIntake(memory_bus, topology.control, shutdown, handler)
        intake.start()

        memory_bus.publish(topology.control, "text/plain", b"boom")
        memory_bus.publish(topology.control, "text/plain", b"ok")
        wait_for_sync(lambda: len(handler.messages) == 1, timeout=2.0)

        assert intake.is_running
        assert handler.messages[0].body == b"ok"
        shutdown.set()
        intake.join(timeout=1.0)

    def test_stops_on_shutdown_with_no_traffic(self, memory_bus, topology, shutdown):
        intake = CommandIntake(memory_bus, topology.control, shutdown)
        intake.start()
        assert intake.is_running

        shutdown.set()
        intake.join(timeout=1.0)
        assert not intake.is_running

    def test_stops_when_bus_closes(self, memory_bus, topology, shutdown):
        intake = CommandIntake(memory_bus, topology.control, shutdown)
        intake.start()

        memory_bus.close()
        intake.join(timeout=1.0)
        assert not intake.is_running

    def test_subscribe_failure_raises_on_start(self, memory_bus, shutdown):
        intake = CommandIntake(memory_bus, Topic("never_declared"), shutdown)
        with pytest.raises(TopologyError):
            intake.start()
        assert not intake.is_running


class TestDiscardCommandHandler:
    def test_accepts_any_message(self):
        DiscardCommandHandler().handle(BusMessage(topic="t", body=b"\x00\x01"))
