from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from models.room import Room


class BookingFailure(str, Enum):
    INVALID_REQUEST = "invalid_request"                    # count outside the allowed range
    INSUFFICIENT_AVAILABILITY = "insufficient_availability"  # fewer free rooms than requested
    NO_FEASIBLE_COMBINATION = "no_feasible_combination"    # search produced no candidate


@dataclass
class BookingResult:
    """Outcome of a single allocation request."""
    requested_count: int
    rooms: List[Room] = field(default_factory=list)
    total_travel_time: Optional[int] = None
    phase: Optional[str] = None           # "same_floor" or "cross_floor"
    failure: Optional[BookingFailure] = None
    available_count: int = 0
    explanation_steps: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.failure is None and len(self.rooms) > 0

    @property
    def room_numbers(self) -> List[int]:
        return [r.room_number for r in self.rooms]

    @property
    def floors(self) -> List[int]:
        return sorted(set(r.floor for r in self.rooms))

    @property
    def message(self) -> str:
        """Headline message for display (first explanation step)."""
        return self.explanation_steps[0] if self.explanation_steps else ""
