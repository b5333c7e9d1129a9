"""Hotel Room Reservation System: Streamlit entry point."""

import logging
import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import tab_hotel_floor, tab_booking_log

logging.basicConfig(level=logging.WARNING, format="%(name)s | %(message)s")
logging.getLogger("data.occupancy_store").setLevel(logging.INFO)


def main():
    st.set_page_config(
        page_title="Hotel Room Reservation",
        page_icon="🏨",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()
    tab_hotel_floor.apply_actions(sidebar_state)

    tab1, tab2 = st.tabs([
        "🏨 Hotel Floor View",
        "📋 Booking Log",
    ])

    with tab1:
        tab_hotel_floor.render(sidebar_state)
    with tab2:
        tab_booking_log.render(sidebar_state)


if __name__ == "__main__":
    main()
