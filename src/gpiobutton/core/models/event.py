"""Press event value object and its wire format.

The body of every event message is the press duration in milliseconds,
encoded as an 8-byte big-endian unsigned integer.  The content type carries
the button name so several buttons can share one broadcast topic.
"""

from __future__ import annotations

import struct

from pydantic import BaseModel, ConfigDict, Field

CONTENT_TYPE_PREFIX = "application/button_press_"

_PAYLOAD = struct.Struct(">Q")
_MAX_U64 = 2**64 - 1


def content_type_for(button_name: str) -> str:
    """Return the content type tag for presses of *button_name*."""
    return f"{CONTENT_TYPE_PREFIX}{button_name}"


def button_name_from_content_type(content_type: str | None) -> str | None:
    """Inverse of :func:`content_type_for`; ``None`` for foreign content types."""
    if not content_type or not content_type.startswith(CONTENT_TYPE_PREFIX):
        return None
    return content_type[len(CONTENT_TYPE_PREFIX):] or None


class PressEvent(BaseModel):
    """One completed press of the button."""

    model_config = ConfigDict(frozen=True)

    button_name: str = Field(description="Name of the button that was pressed")
    duration_ms: int = Field(ge=0, le=_MAX_U64, description="Press duration, truncated to ms")

    @property
    def content_type(self) -> str:
        return content_type_for(self.button_name)

    def to_payload(self) -> bytes:
        return _PAYLOAD.pack(self.duration_ms)

    @classmethod
    def from_payload(cls, button_name: str, body: bytes) -> PressEvent:
        """Decode an event message body.

        Raises:
            ValueError: If *body* is not exactly 8 bytes.
        """
        if len(body) != _PAYLOAD.size:
            raise ValueError(
                f"Press payload must be {_PAYLOAD.size} bytes, got {len(body)}"
            )
        (duration_ms,) = _PAYLOAD.unpack(body)
        return cls(button_name=button_name, duration_ms=duration_ms)
