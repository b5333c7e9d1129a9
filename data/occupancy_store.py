"""In-memory occupancy state for the hotel inventory."""

import logging
import math
import random
from typing import Dict, Iterable, List, Optional

from models.room import Room
from engine.topology import build_inventory
from config.defaults import RANDOM_OCCUPANCY_MIN_PCT, RANDOM_OCCUPANCY_MAX_PCT

logger = logging.getLogger(__name__)


class OccupancyStore:
    """Owns the room inventory and the only mutators of its occupied flags.

    Construct one per session and pass it explicitly to whatever needs it.
    The allocator only reads from it; book, reset and randomize write to it.
    """

    def __init__(self, rooms: Optional[List[Room]] = None):
        self._rooms: List[Room] = rooms if rooms is not None else build_inventory()
        self._index: Dict[int, Room] = {r.room_number: r for r in self._rooms}
        if len(self._index) != len(self._rooms):
            raise ValueError("Room numbers must be unique.")

    # --- Reads ---

    @property
    def rooms(self) -> List[Room]:
        return self._rooms

    @property
    def total_rooms(self) -> int:
        return len(self._rooms)

    @property
    def occupied_count(self) -> int:
        return sum(1 for r in self._rooms if r.occupied)

    @property
    def available_count(self) -> int:
        return self.total_rooms - self.occupied_count

    @property
    def occupancy_pct(self) -> float:
        return self.occupied_count / self.total_rooms if self.total_rooms > 0 else 0.0

    def get_room(self, room_number: int) -> Room:
        return self._index[room_number]

    def is_occupied(self, room_number: int) -> bool:
        return self._index[room_number].occupied

    def available_rooms(self) -> List[Room]:
        """Free rooms in inventory order."""
        return [r for r in self._rooms if not r.occupied]

    def available_on_floor(self, floor: int) -> List[Room]:
        """Free rooms on one floor, by ascending room number."""
        return sorted(
            (r for r in self._rooms if r.floor == floor and not r.occupied),
            key=lambda r: r.room_number,
        )

    # --- Writes ---

    def book(self, rooms: Iterable[Room]) -> List[Room]:
        """Mark exactly the given rooms occupied.

        All rooms are checked before any flag changes, so a bad request
        leaves the store untouched.
        """
        targets = []
        for room in rooms:
            stored = self._index[room.room_number]
            if stored.occupied:
                raise ValueError(f"{stored} is already occupied.")
            targets.append(stored)

        for room in targets:
            room.occupied = True
        logger.info("Booked rooms %s", [r.room_number for r in targets])
        return targets

    # Alias matching the booking-flow vocabulary: allocate, then commit.
    commit = book

    def reset(self) -> None:
        """Free every room."""
        for room in self._rooms:
            room.occupied = False
        logger.info("Reset occupancy for %d rooms", self.total_rooms)

    def random_occupancy_bounds(self, rule_config: Optional[dict] = None) -> tuple:
        """Inclusive (low, high) room counts for random occupancy."""
        cfg = rule_config or {}
        min_pct = cfg.get("random_min_pct", RANDOM_OCCUPANCY_MIN_PCT)
        max_pct = cfg.get("random_max_pct", RANDOM_OCCUPANCY_MAX_PCT)
        low = math.ceil(self.total_rooms * min_pct)
        high = math.floor(self.total_rooms * max_pct)
        return low, max(low, high)

    def randomize(
        self,
        rng: Optional[random.Random] = None,
        rule_config: Optional[dict] = None,
    ) -> List[Room]:
        """Occupy a random 10%-50% of the hotel, drawn from currently free rooms.

        Adds to existing occupancy. The count is capped at the number of
        free rooms. Returns the newly occupied rooms.
        """
        rng = rng or random.Random()
        low, high = self.random_occupancy_bounds(rule_config)
        target = rng.randint(low, high)

        available = self.available_rooms()
        count = min(target, len(available))
        chosen = rng.sample(available, count)

        for room in chosen:
            room.occupied = True
        logger.info("Randomly occupied %d rooms (target %d)", count, target)
        return sorted(chosen, key=lambda r: r.sort_key)
