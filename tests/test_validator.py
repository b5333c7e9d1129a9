"""Tests for booking request validation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from data.validator import validate_booking_count, parse_booking_count


class TestParseBookingCount:
    def test_int(self):
        assert parse_booking_count(3) == 3

    def test_whole_float(self):
        assert parse_booking_count(4.0) == 4

    def test_fractional_float(self):
        assert parse_booking_count(2.5) is None

    def test_text(self):
        assert parse_booking_count(" 2 ") == 2
        assert parse_booking_count("two") is None

    def test_bool_rejected(self):
        assert parse_booking_count(True) is None

    def test_none(self):
        assert parse_booking_count(None) is None


class TestValidateBookingCount:
    def test_valid_range(self):
        for count in range(1, 6):
            assert validate_booking_count(count).is_valid

    def test_below_range(self):
        result = validate_booking_count(0)
        assert not result.is_valid
        assert result.errors == ["You can book between 1 and 5 rooms."]

    def test_above_range(self):
        assert not validate_booking_count(6).is_valid

    def test_not_a_number(self):
        result = validate_booking_count("many")
        assert not result.is_valid
        assert "whole number" in result.errors[0]

    def test_rule_config_bounds(self):
        config = {"min_rooms_per_booking": 2, "max_rooms_per_booking": 3}
        assert not validate_booking_count(1, config).is_valid
        assert validate_booking_count(3, config).is_valid
        assert validate_booking_count(4, config).errors == ["You can book between 2 and 3 rooms."]


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
