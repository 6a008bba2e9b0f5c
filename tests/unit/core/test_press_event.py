"""Tests for the PressEvent wire format."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from gpiobutton.core.models.event import (
    PressEvent,
    button_name_from_content_type,
    content_type_for,
)


class TestPressEvent:
    def test_payload_is_8_byte_big_endian(self):
        event = PressEvent(button_name="doorbell", duration_ms=300)
        assert event.to_payload() == b"\x00\x00\x00\x00\x00\x00\x01\x2c"

    def test_max_duration_fits(self):
        event = PressEvent(button_name="x", duration_ms=2**64 - 1)
        assert event.to_payload() == b"\xff" * 8

    def test_content_type_embeds_button_name(self):
        event = PressEvent(button_name="doorbell", duration_ms=1)
        assert event.content_type == "application/button_press_doorbell"

    def test_from_payload(self):
        event = PressEvent.from_payload("doorbell", b"\x00" * 6 + b"\x03\xe8")
        assert event.duration_ms == 1000
        assert event.button_name == "doorbell"

    def test_from_payload_rejects_wrong_length(self):
        with pytest.raises(ValueError, match="8 bytes"):
            PressEvent.from_payload("doorbell", b"\x01\x02")

    def test_negative_duration_rejected(self):
        with pytest.raises(ValidationError):
            PressEvent(button_name="doorbell", duration_ms=-1)

    def test_is_immutable(self):
        event = PressEvent(button_name="doorbell", duration_ms=5)
        with pytest.raises(ValidationError):
            event.duration_ms = 10  # type: ignore[misc]


class TestContentType:
    def test_round_trip_name(self):
        assert button_name_from_content_type(content_type_for("hall")) == "hall"

    @pytest.mark.parametrize("value", [None, "", "text/plain", "application/button_press_"])
    def test_foreign_content_types(self, value):
        assert button_name_from_content_type(value) is None
