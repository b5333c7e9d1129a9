"""Global sidebar controls for booking, reset and random occupancy."""

import streamlit as st
from dataclasses import dataclass
from data.session_store import get_rule_config
from config.defaults import MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING


@dataclass
class SidebarState:
    room_count: int
    book_clicked: bool = False
    reset_clicked: bool = False
    random_clicked: bool = False


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    cfg = get_rule_config()
    min_rooms = cfg.get("min_rooms_per_booking", MIN_ROOMS_PER_BOOKING)
    max_rooms = cfg.get("max_rooms_per_booking", MAX_ROOMS_PER_BOOKING)

    with st.sidebar:
        st.title("Hotel Reservations")
        st.divider()

        room_count = st.number_input(
            "No. of Rooms",
            min_value=min_rooms,
            max_value=max_rooms,
            value=min_rooms,
            step=1,
            key="sidebar_room_count",
        )

        book_clicked = st.button("Book", type="primary", use_container_width=True)
        reset_clicked = st.button("Reset", use_container_width=True)
        random_clicked = st.button("Random", use_container_width=True)

        st.divider()
        st.caption(
            "Rooms are chosen on a single floor where possible, "
            "otherwise across floors, to minimise travel time."
        )

    return SidebarState(
        room_count=int(room_count),
        book_clicked=book_clicked,
        reset_clicked=reset_clicked,
        random_clicked=random_clicked,
    )
