"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import List, Optional
from datetime import datetime

from models.audit import BookingLogEntry
from models.booking import BookingResult
from data.occupancy_store import OccupancyStore
from config.defaults import (
    MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING,
    RANDOM_OCCUPANCY_MIN_PCT, RANDOM_OCCUPANCY_MAX_PCT,
)


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "last_result": None,
        "last_booked": [],
        "message": "",
        "booking_log": [],
        "rule_config": {
            "min_rooms_per_booking": MIN_ROOMS_PER_BOOKING,
            "max_rooms_per_booking": MAX_ROOMS_PER_BOOKING,
            "random_min_pct": RANDOM_OCCUPANCY_MIN_PCT,
            "random_max_pct": RANDOM_OCCUPANCY_MAX_PCT,
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default
    # Built once per session; never replaced, only mutated through its methods.
    if "occupancy_store" not in st.session_state:
        st.session_state["occupancy_store"] = OccupancyStore()


# --- Getters ---

def get_occupancy_store() -> OccupancyStore:
    return st.session_state["occupancy_store"]


def get_last_result() -> Optional[BookingResult]:
    return st.session_state.get("last_result")


def get_last_booked() -> List[int]:
    return st.session_state.get("last_booked", [])


def get_message() -> str:
    return st.session_state.get("message", "")


def get_booking_log() -> List[BookingLogEntry]:
    return st.session_state.get("booking_log", [])


def get_rule_config() -> dict:
    return st.session_state.get("rule_config", {})


# --- Setters ---

def set_last_result(result: Optional[BookingResult]):
    st.session_state["last_result"] = result


def set_last_booked(room_numbers: List[int]):
    st.session_state["last_booked"] = room_numbers


def set_message(message: str):
    st.session_state["message"] = message


# --- Booking Log ---

def add_log_entry(
    action: str,
    room_numbers: Optional[List[int]] = None,
    travel_time: Optional[int] = None,
    message: str = "",
):
    entry = BookingLogEntry(
        timestamp=datetime.now(),
        action=action,
        room_numbers=list(room_numbers or []),
        travel_time=travel_time,
        occupied_after=get_occupancy_store().occupied_count,
        message=message,
    )
    st.session_state["booking_log"].append(entry)
