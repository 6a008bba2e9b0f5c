"""GPIO hardware backend.

Provides :class:`GPIOInputLine`.  Needs a board supported by ``gpiozero``
(and ``lgpio`` on a Raspberry Pi 5) to open a real line.
"""
