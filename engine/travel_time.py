"""Travel-time cost model between rooms and across room sets.

A guest walks 1 minute per room along a corridor and rides the lift at
2 minutes per floor. Position 1 on every floor sits next to the lift landing.
"""

from typing import List, Sequence

from models.room import Room
from config.defaults import MINUTES_PER_ROOM, MINUTES_PER_FLOOR


def position_on_floor(room: Room) -> int:
    """1-indexed distance of a room from its floor's lift landing."""
    return room.room_number - room.floor * 100


def pairwise_travel_time(a: Room, b: Room) -> int:
    """Minutes to travel between two rooms.

    Same floor: walk the corridor directly. Different floors: walk from room a
    to the lift, ride to b's floor, then walk out to room b.
    """
    pos_a = position_on_floor(a)
    pos_b = position_on_floor(b)

    if a.floor == b.floor:
        return abs(pos_a - pos_b) * MINUTES_PER_ROOM

    to_lift = (pos_a - 1) * MINUTES_PER_ROOM
    from_lift = (pos_b - 1) * MINUTES_PER_ROOM
    vertical = abs(a.floor - b.floor) * MINUTES_PER_FLOOR
    return to_lift + vertical + from_lift


def sort_for_travel(rooms: Sequence[Room]) -> List[Room]:
    """Order rooms by floor, then room number."""
    return sorted(rooms, key=lambda r: r.sort_key)


def set_travel_time(rooms: Sequence[Room]) -> int:
    """Approximate travel cost of a room set.

    Only the first and last rooms in floor/room-number order are measured,
    not a tour through every room.
    """
    if len(rooms) <= 1:
        return 0
    ordered = sort_for_travel(rooms)
    return pairwise_travel_time(ordered[0], ordered[-1])
