"""Message bus factory."""

from __future__ import annotations

import logging
import uuid

from gpiobutton.core.interfaces.bus import MessageBusInterface
from gpiobutton.core.models.config import ButtonConfig

_log = logging.getLogger(__name__)


def create_message_bus(config: ButtonConfig) -> MessageBusInterface:
    """Return an unconnected :class:`MQTTBus` for ``config.broker_uri``.

    Raises:
        BusConnectionError: If the broker URI cannot be parsed.
    """
    from gpiobutton.bus.mqtt_bus import MQTTBus

    client_id = f"gpiobutton-{config.button_name}-{uuid.uuid4().hex[:8]}"
    _log.debug("Creating MQTTBus (client_id=%s)", client_id)
    return MQTTBus(
        config.broker_uri,
        client_id=client_id,
        connect_timeout=config.system.connect_timeout_s,
    )
