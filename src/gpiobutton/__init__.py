"""gpiobutton — relays presses of a GPIO push-button to a message bus."""

__version__ = "0.1.0"
