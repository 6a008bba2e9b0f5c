"""Pydantic models for configuration, press events, and button state."""
from gpiobutton.core.models.config import ButtonConfig, HardwareConfig, SystemConfig, TopicsConfig
from gpiobutton.core.models.event import PressEvent, button_name_from_content_type, content_type_for
from gpiobutton.core.models.state import ButtonState

__all__ = [
    "ButtonConfig",
    "HardwareConfig",
    "SystemConfig",
    "TopicsConfig",
    "PressEvent",
    "content_type_for",
    "button_name_from_content_type",
    "ButtonState",
]
