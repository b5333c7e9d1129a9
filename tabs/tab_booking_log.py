"""Tab 2: Booking Log, the history of occupancy changes."""

import streamlit as st

from data.session_store import get_booking_log
from data.loader import booking_log_frame


def render(sidebar_state):
    """Render the Booking Log tab."""
    st.header("Booking Log")

    log = get_booking_log()
    if not log:
        st.info("No bookings yet.")
        return

    log_df = booking_log_frame(log)
    st.dataframe(log_df, use_container_width=True, height=400)

    csv = log_df.to_csv(index=False)
    st.download_button("Export Booking Log (CSV)", csv, "booking_log.csv", "text/csv")
