"""gpiobutton — application entry point.

Usage: ``gpiobutton-mq <config file>``

Wires together: Config → Logging → LifecycleManager (input line → broker →
topology → command intake → polling loop).  SIGINT sets the shutdown signal;
the process then exits 0.  Fatal startup errors exit 1.
"""

from __future__ import annotations

import logging as _logging
import signal
import sys
from pathlib import Path

from gpiobutton.bus.factory import create_message_bus
from gpiobutton.config.config_manager import load_config
from gpiobutton.core.errors import GPIOButtonError
from gpiobutton.core.lifecycle import LifecycleManager
from gpiobutton.hardware.factory import create_input_line
from gpiobutton.logging.logger import setup_logging

_log = _logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_USAGE = 2


def main(argv: list[str] | None = None) -> int:
    """Run the button bridge; return the process exit status."""
    argv = sys.argv if argv is None else argv
    prog = Path(argv[0]).name if argv else "gpiobutton-mq"

    if len(argv) != 2:
        print(f"Usage: {prog} <config file>", file=sys.stderr)
        return EXIT_USAGE

    # 1. Load configuration (before any hardware or broker work)
    try:
        config = load_config(argv[1])
    except (OSError, ValueError) as exc:
        print(f"Failed to load config {argv[1]}: {exc}", file=sys.stderr)
        return EXIT_FATAL

    # 2. Logging
    try:
        setup_logging(config.system.log_level, config.system.log_dir)
    except OSError as exc:
        print(f"Failed to set up logging in {config.system.log_dir}: {exc}", file=sys.stderr)
        return EXIT_FATAL
    _log.info("Starting gpiobutton (button=%s)", config.button_name)

    # 3. Lifecycle (blocks until SIGINT)
    manager = LifecycleManager(
        config, line_factory=create_input_line, bus_factory=create_message_bus
    )
    previous_handler = signal.signal(signal.SIGINT, manager.handle_signal)
    try:
        manager.run()
    except GPIOButtonError as exc:
        _log.critical("Failed to init gpiobutton: %s", exc)
        print(f"Failed to init gpiobutton: {exc}", file=sys.stderr)
        return EXIT_FATAL
    finally:
        signal.signal(signal.SIGINT, previous_handler)

    _log.info("gpiobutton stopped")
    return EXIT_OK


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
