"""Config manager — load JSON → apply env overrides → validate → ButtonConfig."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from gpiobutton.core.models.config import ButtonConfig

_log = logging.getLogger(__name__)

# Environment variable → config field mapping.
# Keys are env-var names; values are ``(section, field, type)`` tuples.
_ENV_OVERRIDES: dict[str, tuple[str, str, type]] = {
    "GPIOBUTTON_LOG_LEVEL": ("system", "log_level", str),
    "GPIOBUTTON_DEV_MODE": ("system", "dev_mode", bool),
    "GPIOBUTTON_POLL_INTERVAL_MS": ("system", "poll_interval_ms", int),
}


def _coerce(value: str, target_type: type) -> object:
    """Coerce a string env-var value to the expected Python type."""
    if target_type is bool:
        return value.strip().lower() in ("1", "true", "yes")
    return target_type(value)


def load_config(config_path: Path | str) -> ButtonConfig:
    """Load, override, and validate the button configuration.

    Args:
        config_path: Path to the JSON config file.

    Returns:
        A fully-validated, immutable :class:`ButtonConfig`.

    Raises:
        FileNotFoundError: If the config file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the JSON root is not an object or an override is malformed.
        pydantic.ValidationError: If the content does not match the schema.
    """
    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    _log.info("Loading config from %s", path)

    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(
            f"Config root must be a JSON object, got {type(raw).__name__}"
        )

    # Apply env overrides ------------------------------------------------
    for env_key, (section, field, typ) in _ENV_OVERRIDES.items():
        env_val = os.environ.get(env_key)
        if env_val is not None:
            raw.setdefault(section, {})[field] = _coerce(env_val, typ)
            _log.debug("Env override: %s → %s.%s = %r", env_key, section, field, env_val)

    return ButtonConfig.model_validate(raw)
