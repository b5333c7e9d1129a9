"""Inventory and occupancy conversion into DataFrames for display and export."""

import pandas as pd
from typing import Iterable, List, Optional

from models.room import Room
from models.audit import BookingLogEntry
from engine.topology import rooms_by_floor
from engine.travel_time import position_on_floor


def inventory_frame(rooms: List[Room], highlight: Optional[Iterable[int]] = None) -> pd.DataFrame:
    """One row per room, in inventory order."""
    highlighted = set(highlight or [])
    rows = []
    for room in sorted(rooms, key=lambda r: r.sort_key):
        rows.append({
            "Room": room.room_number,
            "Floor": room.floor,
            "Position": position_on_floor(room),
            "Occupied": room.occupied,
            "Just Booked": room.room_number in highlighted,
        })
    return pd.DataFrame(rows, columns=["Room", "Floor", "Position", "Occupied", "Just Booked"])


def floor_summary_frame(rooms: List[Room]) -> pd.DataFrame:
    """Per-floor totals, top floor first."""
    rows = []
    for floor, floor_rooms in rooms_by_floor(rooms).items():
        occupied = sum(1 for r in floor_rooms if r.occupied)
        total = len(floor_rooms)
        rows.append({
            "Floor": floor,
            "Total Rooms": total,
            "Occupied": occupied,
            "Available": total - occupied,
            "Occupancy": occupied / total if total > 0 else 0.0,
        })
    df = pd.DataFrame(rows, columns=["Floor", "Total Rooms", "Occupied", "Available", "Occupancy"])
    return df.sort_values("Floor", ascending=False).reset_index(drop=True)


def booking_log_frame(entries: List[BookingLogEntry]) -> pd.DataFrame:
    """Booking log rows, newest first."""
    rows = []
    for entry in reversed(entries):
        rows.append({
            "Timestamp": entry.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
            "Action": entry.action,
            "Rooms": ", ".join(str(n) for n in entry.room_numbers) or "—",
            "Travel Time (min)": entry.travel_time if entry.travel_time is not None else "—",
            "Occupied After": entry.occupied_after,
            "Message": entry.message,
        })
    return pd.DataFrame(
        rows,
        columns=["Timestamp", "Action", "Rooms", "Travel Time (min)", "Occupied After", "Message"],
    )
