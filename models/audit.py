from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class BookingLogEntry:
    timestamp: datetime
    action: str              # "book", "book_failed", "reset", "randomize"
    room_numbers: List[int] = field(default_factory=list)
    travel_time: Optional[int] = None
    occupied_after: int = 0
    message: str = ""
