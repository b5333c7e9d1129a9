"""Reusable KPI metric card widgets."""

import streamlit as st


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_status_banner(message: str, level: str = "info"):
    """Render the status message for the last operation."""
    if not message:
        return
    if level == "error":
        st.error(message, icon="🔴")
    elif level == "success":
        st.success(message, icon="🟢")
    else:
        st.info(message, icon="🔵")
