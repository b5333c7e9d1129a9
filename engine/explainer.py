"""Generates human-readable messages for booking results and occupancy changes."""

from typing import List, Sequence

from models.room import Room


def explain_invalid_request(errors: Sequence[str]) -> List[str]:
    return list(errors) or ["Invalid booking request."]


def explain_insufficient_availability(requested: int, available: int) -> List[str]:
    return [
        f"Not enough rooms available. {available} rooms are free.",
        f"Requested {requested} room{'s' if requested != 1 else ''}.",
    ]


def explain_no_feasible_combination() -> List[str]:
    return ["Could not find suitable rooms based on criteria."]


def explain_same_floor(rooms: Sequence[Room], travel_time: int, floors_checked: int) -> List[str]:
    """Explain a same-floor win."""
    floor = rooms[0].floor
    steps = [
        f"Found best rooms on floor {floor} with total travel time: {travel_time} minutes.",
        f"Step 1 - Same-floor search: {floors_checked} floor{'s' if floors_checked != 1 else ''} "
        f"had enough free rooms",
        f"Step 2 - Selected rooms {_format_numbers(rooms)} on floor {floor}",
    ]
    return steps


def explain_cross_floor(rooms: Sequence[Room], travel_time: int) -> List[str]:
    """Explain a win that spans floors."""
    floors = sorted(set(r.floor for r in rooms))
    return [
        f"Found best rooms spanning floors with total travel time: {travel_time} minutes.",
        "Step 1 - Same-floor search: no single floor had enough free rooms",
        f"Step 2 - Cross-floor search: selected rooms {_format_numbers(rooms)} "
        f"across floors {', '.join(str(f) for f in floors)}",
    ]


def booked_message(rooms: Sequence[Room]) -> str:
    return f"Successfully booked rooms: {_format_numbers(rooms)}"


def reset_message() -> str:
    return "All bookings have been reset."


def randomize_message(count: int) -> str:
    return f"Generated random occupancy for {count} rooms."


def _format_numbers(rooms: Sequence[Room]) -> str:
    return ", ".join(str(r.room_number) for r in rooms)
