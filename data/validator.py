"""Validation for booking requests."""

from dataclasses import dataclass, field
from typing import List, Optional

from config.defaults import MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def parse_booking_count(raw) -> Optional[int]:
    """Coerce raw input (int, float or text) to an integer count, or None."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        text = raw.strip()
        try:
            return int(text)
        except ValueError:
            return None
    return None


def validate_booking_count(raw, rule_config: Optional[dict] = None) -> ValidationResult:
    """Check that a requested room count is a whole number within policy bounds."""
    cfg = rule_config or {}
    min_rooms = cfg.get("min_rooms_per_booking", MIN_ROOMS_PER_BOOKING)
    max_rooms = cfg.get("max_rooms_per_booking", MAX_ROOMS_PER_BOOKING)

    result = ValidationResult()
    count = parse_booking_count(raw)
    if count is None:
        result.is_valid = False
        result.errors.append(f"Room count must be a whole number, got {raw!r}.")
        return result

    if count < min_rooms or count > max_rooms:
        result.is_valid = False
        result.errors.append(f"You can book between {min_rooms} and {max_rooms} rooms.")

    return result
