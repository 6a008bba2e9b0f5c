"""Shared pytest fixtures for gpiobutton tests."""

from __future__ import annotations

import threading

import pytest

from gpiobutton.bus.memory_bus import InMemoryBus
from gpiobutton.core.lifecycle import Topology, declare_topology
from gpiobutton.core.models.config import ButtonConfig
from tests.helpers.config import make_config


@pytest.fixture(scope="session")
def button_config() -> ButtonConfig:
    """Session-scoped default config."""
    return make_config()


@pytest.fixture
def shutdown() -> threading.Event:
    return threading.Event()


@pytest.fixture
def memory_bus():
    """A connected InMemoryBus that is closed after the test."""
    bus = InMemoryBus()
    bus.connect()
    yield bus
    bus.close()


@pytest.fixture
def topology(memory_bus: InMemoryBus, button_config: ButtonConfig) -> Topology:
    return declare_topology(memory_bus, button_config.topics)
