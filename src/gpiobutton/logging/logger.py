"""Root-logger setup and the per-button log adapter.

This package is named ``gpiobutton.logging`` and so shadows the stdlib
module inside the project; the stdlib is imported as ``_logging``.
"""

from __future__ import annotations

import logging as _logging
import os
from logging.handlers import RotatingFileHandler
from typing import Any, MutableMapping

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_LOG_FILE = "gpiobutton.log"


def setup_logging(
    log_level: str = "INFO",
    log_dir: str | None = "logs",
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Send root-logger output to stderr and, if *log_dir* is set, to a rotating file.

    Replaces any handlers installed by an earlier call.  Unknown level
    names fall back to INFO.

    Raises:
        OSError: If *log_dir* cannot be created or the log file cannot be
            opened.  The root logger is left untouched in that case.
    """
    level = getattr(_logging, log_level.upper(), _logging.INFO)
    formatter = _logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT)

    handlers: list[_logging.Handler] = [_logging.StreamHandler()]
    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                os.path.join(log_dir, _LOG_FILE),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        )

    root = _logging.getLogger()
    for old in root.handlers[:]:
        root.removeHandler(old)
        old.close()

    root.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)


class ContextualLogger(_logging.LoggerAdapter):
    """Prefixes every message with ``[key=value]`` pairs, e.g. ``[button=doorbell]``."""

    def __init__(self, logger: _logging.Logger, **context: Any) -> None:
        super().__init__(logger, context)
        self._prefix = " ".join(f"[{k}={v}]" for k, v in context.items())

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        if self._prefix:
            msg = f"{self._prefix} {msg}"
        return msg, kwargs
