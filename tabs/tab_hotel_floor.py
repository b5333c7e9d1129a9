"""Tab 1: Hotel Floor View with booking actions and the occupancy grid."""

import streamlit as st

from data.session_store import (
    get_occupancy_store, get_rule_config, get_last_result, get_last_booked, get_message,
    set_last_result, set_last_booked, set_message, add_log_entry,
)
from data.loader import inventory_frame, floor_summary_frame
from engine.allocation_engine import book_rooms
from engine.explainer import booked_message, reset_message, randomize_message
from components.charts import occupancy_grid, occupancy_donut
from components.metrics_cards import render_metric_row, render_status_banner
from components.tables import render_floor_table


def _handle_book(room_count: int):
    store = get_occupancy_store()
    result = book_rooms(store, room_count, get_rule_config())
    set_last_result(result)
    if result.success:
        message = booked_message(result.rooms)
        set_last_booked(result.room_numbers)
        add_log_entry("book", result.room_numbers, result.total_travel_time, message)
    else:
        message = result.message
        set_last_booked([])
        add_log_entry("book_failed", message=message)
    set_message(message)


def _handle_reset():
    get_occupancy_store().reset()
    message = reset_message()
    set_last_result(None)
    set_last_booked([])
    set_message(message)
    add_log_entry("reset", message=message)


def _handle_random():
    chosen = get_occupancy_store().randomize(rule_config=get_rule_config())
    message = randomize_message(len(chosen))
    set_last_result(None)
    set_last_booked([])
    set_message(message)
    add_log_entry("randomize", [r.room_number for r in chosen], message=message)


def apply_actions(sidebar_state):
    """Apply whichever sidebar button was pressed this run."""
    if sidebar_state.book_clicked:
        _handle_book(sidebar_state.room_count)
    elif sidebar_state.reset_clicked:
        _handle_reset()
    elif sidebar_state.random_clicked:
        _handle_random()


def render(sidebar_state):
    """Render the Hotel Floor View tab."""
    st.header("Hotel Floor View")

    store = get_occupancy_store()
    last_result = get_last_result()

    level = "info"
    if last_result is not None:
        level = "success" if last_result.success else "error"
    render_status_banner(get_message(), level)

    render_metric_row([
        {"label": "Total Rooms", "value": store.total_rooms},
        {"label": "Occupied", "value": store.occupied_count},
        {"label": "Available", "value": store.available_count},
        {"label": "Occupancy", "value": f"{store.occupancy_pct:.0%}"},
    ])

    st.divider()

    col1, col2 = st.columns([3, 2])

    with col1:
        fig = occupancy_grid(inventory_frame(store.rooms, highlight=get_last_booked()))
        st.plotly_chart(fig, use_container_width=True)

    with col2:
        fig = occupancy_donut(store.occupied_count, store.total_rooms)
        st.plotly_chart(fig, use_container_width=True)

        if last_result is not None and last_result.success:
            st.subheader("Last Booking")
            st.metric("Travel Time", f"{last_result.total_travel_time} min")
            for step in last_result.explanation_steps[1:]:
                st.caption(step)

    st.divider()

    st.subheader("Floor Availability")
    render_floor_table(floor_summary_frame(store.rooms))
