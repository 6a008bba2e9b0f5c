"""Core services: press detection, event publishing, command intake, lifecycle."""

from gpiobutton.core.button_machine import ButtonStateMachine
from gpiobutton.core.command_intake import CommandIntake
from gpiobutton.core.event_publisher import EventPublisher
from gpiobutton.core.lifecycle import LifecycleManager, Topology, declare_topology
from gpiobutton.core.press_poller import PressPoller

__all__ = [
    "ButtonStateMachine",
    "CommandIntake",
    "EventPublisher",
    "LifecycleManager",
    "PressPoller",
    "Topology",
    "declare_topology",
]
