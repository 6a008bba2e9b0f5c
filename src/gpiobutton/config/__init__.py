"""Configuration loading."""

from gpiobutton.config.config_manager import load_config

__all__ = ["load_config"]
