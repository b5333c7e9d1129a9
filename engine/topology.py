"""Room topology: the fixed hotel inventory and its floor grouping."""

from collections import defaultdict
from typing import Dict, List

from models.room import Room
from config.defaults import (
    NUM_STANDARD_FLOORS, ROOMS_PER_STANDARD_FLOOR,
    TOP_FLOOR, ROOMS_ON_TOP_FLOOR,
)


def rooms_on_floor(floor: int) -> int:
    """Number of rooms built on a floor."""
    if floor == TOP_FLOOR:
        return ROOMS_ON_TOP_FLOOR
    if 1 <= floor <= NUM_STANDARD_FLOORS:
        return ROOMS_PER_STANDARD_FLOOR
    return 0


def floor_numbers() -> List[int]:
    """All floors in ascending order."""
    return list(range(1, NUM_STANDARD_FLOORS + 1)) + [TOP_FLOOR]


def build_inventory() -> List[Room]:
    """Generate every room, ordered by floor then room number.

    Floors 1-9 hold rooms f01..f10 (e.g. 301-310); floor 10 holds 1001-1007.
    """
    rooms = []
    for floor in range(1, NUM_STANDARD_FLOORS + 1):
        for i in range(1, ROOMS_PER_STANDARD_FLOOR + 1):
            rooms.append(Room(room_number=floor * 100 + i, floor=floor))
    for i in range(1, ROOMS_ON_TOP_FLOOR + 1):
        rooms.append(Room(room_number=TOP_FLOOR * 100 + i, floor=TOP_FLOOR))
    return rooms


def rooms_by_floor(rooms: List[Room]) -> Dict[int, List[Room]]:
    """Group rooms per floor, each floor sorted by ascending room number."""
    grouped: Dict[int, List[Room]] = defaultdict(list)
    for room in rooms:
        grouped[room.floor].append(room)
    return {
        floor: sorted(grouped[floor], key=lambda r: r.room_number)
        for floor in sorted(grouped)
    }
