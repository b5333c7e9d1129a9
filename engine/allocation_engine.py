"""Best-fit room allocation: same-floor first, then across floors."""

import logging
from typing import Dict, List, Optional, Tuple

from models.room import Room
from models.booking import BookingFailure, BookingResult
from data.occupancy_store import OccupancyStore
from data.validator import validate_booking_count, parse_booking_count
from engine.combinations import iter_combinations
from engine.topology import rooms_by_floor
from engine.travel_time import set_travel_time
from engine.explainer import (
    explain_invalid_request, explain_insufficient_availability,
    explain_no_feasible_combination, explain_same_floor, explain_cross_floor,
)
from config.defaults import PHASE_SAME_FLOOR, PHASE_CROSS_FLOOR

logger = logging.getLogger(__name__)


def _best_subset(
    candidates: List[Room],
    count: int,
    best_cost: Optional[int],
    best_rooms: List[Room],
) -> Tuple[Optional[int], List[Room]]:
    """Scan every count-subset of candidates against a running best.

    Strict less-than: on ties the subset found first is kept.
    """
    for combo in iter_combinations(candidates, count):
        cost = set_travel_time(combo)
        if best_cost is None or cost < best_cost:
            best_cost = cost
            best_rooms = combo
    return best_cost, best_rooms


def find_best_same_floor(
    available: List[Room],
    count: int,
) -> Tuple[Optional[int], List[Room], int]:
    """Cheapest single-floor subset over all floors with enough free rooms.

    Floors are scanned in ascending order with one running best, so ties go
    to the lowest floor, then to the earliest combination.
    Returns (cost, rooms, number of floors that qualified).
    """
    best_cost: Optional[int] = None
    best_rooms: List[Room] = []
    floors_checked = 0

    by_floor: Dict[int, List[Room]] = rooms_by_floor(available)
    for floor, floor_rooms in by_floor.items():
        if len(floor_rooms) < count:
            continue
        floors_checked += 1
        best_cost, best_rooms = _best_subset(floor_rooms, count, best_cost, best_rooms)
        logger.debug("Floor %d: %d free, running best %s", floor, len(floor_rooms), best_cost)

    return best_cost, best_rooms, floors_checked


def find_best_cross_floor(
    available: List[Room],
    count: int,
) -> Tuple[Optional[int], List[Room]]:
    """Cheapest subset over every free room, in inventory order."""
    ordered = sorted(available, key=lambda r: r.sort_key)
    return _best_subset(ordered, count, None, [])


def allocate(
    store: OccupancyStore,
    count,
    rule_config: Optional[dict] = None,
) -> BookingResult:
    """Pick the rooms to assign for a request of `count` rooms.

    Reads occupancy only; the caller commits the result. Any floor that can
    hold the whole group wins outright, even if a cheaper cross-floor set
    exists.
    """
    validation = validate_booking_count(count, rule_config)
    if not validation.is_valid:
        return BookingResult(
            requested_count=parse_booking_count(count) or 0,
            failure=BookingFailure.INVALID_REQUEST,
            available_count=store.available_count,
            explanation_steps=explain_invalid_request(validation.errors),
        )
    count = parse_booking_count(count)

    available = store.available_rooms()
    if len(available) < count:
        return BookingResult(
            requested_count=count,
            failure=BookingFailure.INSUFFICIENT_AVAILABILITY,
            available_count=len(available),
            explanation_steps=explain_insufficient_availability(count, len(available)),
        )

    # Phase 1: same floor
    cost, rooms, floors_checked = find_best_same_floor(available, count)
    if rooms:
        logger.debug("Same-floor win: %s (cost %d)", [r.room_number for r in rooms], cost)
        return BookingResult(
            requested_count=count,
            rooms=rooms,
            total_travel_time=cost,
            phase=PHASE_SAME_FLOOR,
            available_count=len(available),
            explanation_steps=explain_same_floor(rooms, cost, floors_checked),
        )

    # Phase 2: across floors
    logger.debug("No floor holds %d free rooms, searching across floors", count)
    cost, rooms = find_best_cross_floor(available, count)
    if not rooms:
        return BookingResult(
            requested_count=count,
            failure=BookingFailure.NO_FEASIBLE_COMBINATION,
            available_count=len(available),
            explanation_steps=explain_no_feasible_combination(),
        )

    return BookingResult(
        requested_count=count,
        rooms=rooms,
        total_travel_time=cost,
        phase=PHASE_CROSS_FLOOR,
        available_count=len(available),
        explanation_steps=explain_cross_floor(rooms, cost),
    )


def book_rooms(
    store: OccupancyStore,
    count,
    rule_config: Optional[dict] = None,
) -> BookingResult:
    """Allocate and, on success, commit the chosen rooms to the store."""
    result = allocate(store, count, rule_config)
    if result.success:
        store.commit(result.rooms)
    return result
