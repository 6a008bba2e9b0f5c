"""Message bus backends: MQTT (paho) for production, in-memory for dev and tests."""

from gpiobutton.bus.factory import create_message_bus
from gpiobutton.bus.memory_bus import InMemoryBus
from gpiobutton.bus.mqtt_bus import BrokerAddress, MQTTBus
from gpiobutton.bus.stream import MessageStream

__all__ = [
    "BrokerAddress",
    "InMemoryBus",
    "MQTTBus",
    "MessageStream",
    "create_message_bus",
]
