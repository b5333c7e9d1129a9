"""Tests for the allocation engine."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.booking import BookingFailure
from data.occupancy_store import OccupancyStore
from engine.allocation_engine import (
    allocate,
    book_rooms,
    find_best_same_floor,
    find_best_cross_floor,
)


def make_store(free=None):
    """Store with every room free, or only the given room numbers free."""
    store = OccupancyStore()
    if free is not None:
        keep = set(free)
        store.book([r for r in store.rooms if r.room_number not in keep])
    return store


def numbers(result):
    return [r.room_number for r in result.rooms]


class TestRequestValidation:
    def test_zero_rooms_invalid(self):
        result = allocate(make_store(), 0)
        assert result.failure == BookingFailure.INVALID_REQUEST
        assert not result.success
        assert result.rooms == []

    def test_six_rooms_invalid(self):
        result = allocate(make_store(), 6)
        assert result.failure == BookingFailure.INVALID_REQUEST
        assert result.message == "You can book between 1 and 5 rooms."

    def test_non_numeric_invalid(self):
        assert allocate(make_store(), "abc").failure == BookingFailure.INVALID_REQUEST
        assert allocate(make_store(), 2.5).failure == BookingFailure.INVALID_REQUEST

    def test_numeric_text_accepted(self):
        result = allocate(make_store(), "3")
        assert result.success
        assert len(result.rooms) == 3

    def test_custom_bounds(self):
        config = {"max_rooms_per_booking": 3}
        assert allocate(make_store(), 4, rule_config=config).failure == BookingFailure.INVALID_REQUEST


class TestInsufficientAvailability:
    def test_reports_available_count(self):
        store = make_store(free=[101, 205, 1007])
        result = allocate(store, 4)
        assert result.failure == BookingFailure.INSUFFICIENT_AVAILABILITY
        assert result.available_count == 3
        assert result.message == "Not enough rooms available. 3 rooms are free."

    def test_full_hotel(self):
        store = make_store(free=[])
        result = allocate(store, 1)
        assert result.failure == BookingFailure.INSUFFICIENT_AVAILABILITY
        assert result.available_count == 0


class TestSameFloorSearch:
    def test_single_room(self):
        result = allocate(make_store(), 1)
        assert numbers(result) == [101]
        assert result.total_travel_time == 0

    def test_two_rooms_full_hotel(self):
        result = allocate(make_store(), 2)
        assert numbers(result) == [101, 102]
        assert result.total_travel_time == 1
        assert result.phase == "same_floor"

    def test_five_rooms_full_hotel(self):
        result = allocate(make_store(), 5)
        assert numbers(result) == [101, 102, 103, 104, 105]
        assert result.total_travel_time == 4

    def test_tie_keeps_lowest_floor(self):
        store = make_store(free=[101, 102] + list(range(201, 211)))
        result = allocate(store, 2)
        assert numbers(result) == [101, 102]

    def test_cheaper_higher_floor_wins(self):
        # Floor 1 only offers a 2-minute pair; floor 2 offers a 1-minute pair
        store = make_store(free=[101, 103, 201, 202])
        result = allocate(store, 2)
        assert numbers(result) == [201, 202]
        assert result.total_travel_time == 1

    def test_skips_occupied_rooms(self):
        store = make_store()
        store.book([store.get_room(101)])
        result = allocate(store, 2)
        assert numbers(result) == [102, 103]

    def test_floor_without_enough_rooms_skipped(self):
        store = make_store(free=[101, 301, 302, 303])
        result = allocate(store, 3)
        assert numbers(result) == [301, 302, 303]
        assert result.phase == "same_floor"

    def test_same_floor_beats_cheaper_cross_floor(self):
        # 101+110 costs 9 on floor 1; 101+201 would cost only 2 across floors
        store = make_store(free=[101, 110, 201])
        result = allocate(store, 2)
        assert numbers(result) == [101, 110]
        assert result.total_travel_time == 9
        assert result.phase == "same_floor"

    def test_top_floor(self):
        store = make_store(free=[1001, 1002, 1003, 1004, 1005, 1006, 1007])
        result = allocate(store, 5)
        assert numbers(result) == [1001, 1002, 1003, 1004, 1005]

    def test_find_best_same_floor_counts_floors(self):
        store = make_store(free=[101, 102, 301, 302, 501])
        cost, rooms, floors_checked = find_best_same_floor(store.available_rooms(), 2)
        assert cost == 1
        assert [r.room_number for r in rooms] == [101, 102]
        assert floors_checked == 2

    def test_find_best_same_floor_none(self):
        store = make_store(free=[101, 201])
        cost, rooms, floors_checked = find_best_same_floor(store.available_rooms(), 2)
        assert cost is None
        assert rooms == []
        assert floors_checked == 0


class TestCrossFloorSearch:
    def test_spans_floors(self):
        store = make_store(free=[101, 201, 305])
        result = allocate(store, 2)
        assert numbers(result) == [101, 201]
        assert result.total_travel_time == 2
        assert result.phase == "cross_floor"
        assert result.floors == [1, 2]

    def test_cheapest_pair_wins(self):
        store = make_store(free=[105, 201, 301])
        result = allocate(store, 2)
        assert numbers(result) == [201, 301]
        assert result.total_travel_time == 2

    def test_tie_keeps_first_found(self):
        # 101+201 and 201+301 both cost 2; 101+201 is enumerated first
        store = make_store(free=[101, 201, 301])
        result = allocate(store, 2)
        assert numbers(result) == [101, 201]

    def test_three_rooms(self):
        store = make_store(free=[101, 102, 201, 202, 301])
        result = allocate(store, 3)
        assert result.phase == "cross_floor"
        # 101, 102, 201 -> pairwise(101, 201) = 0 + 0 + 2
        assert numbers(result) == [101, 102, 201]
        assert result.total_travel_time == 2

    def test_find_best_cross_floor(self):
        store = make_store(free=[1007, 901, 101])
        cost, rooms = find_best_cross_floor(store.available_rooms(), 2)
        # 901 + 1007 = 0 + 6 + 2 = 8 beats 101 + 901 = 16
        assert [r.room_number for r in rooms] == [901, 1007]
        assert cost == 8

    def test_find_best_cross_floor_empty(self):
        cost, rooms = find_best_cross_floor([], 2)
        assert cost is None
        assert rooms == []


class TestAllocateDoesNotMutate:
    def test_allocate_reads_only(self):
        store = make_store()
        allocate(store, 3)
        assert store.occupied_count == 0


class TestBookRooms:
    def test_commits_success(self):
        store = make_store()
        result = book_rooms(store, 3)
        assert result.success
        assert all(store.is_occupied(n) for n in numbers(result))
        assert store.occupied_count == 3

    def test_next_booking_avoids_committed_rooms(self):
        store = make_store()
        first = book_rooms(store, 3)
        second = allocate(store, 3)
        assert set(numbers(first)).isdisjoint(numbers(second))
        assert numbers(second) == [104, 105, 106]

    def test_failure_commits_nothing(self):
        store = make_store(free=[101, 102])
        result = book_rooms(store, 3)
        assert not result.success
        assert store.available_count == 2

    def test_reset_then_full_booking(self):
        store = make_store(free=[])
        store.reset()
        result = allocate(store, 5)
        assert result.success
        assert numbers(result) == [101, 102, 103, 104, 105]


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
