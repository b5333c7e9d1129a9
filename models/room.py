from dataclasses import dataclass


@dataclass
class Room:
    room_number: int
    floor: int
    occupied: bool = False

    @property
    def sort_key(self) -> tuple:
        """Canonical inventory order: ascending floor, then room number."""
        return (self.floor, self.room_number)

    def __str__(self) -> str:
        return f"Room {self.room_number} (Floor {self.floor})"
