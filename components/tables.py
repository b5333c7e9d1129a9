"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from config.defaults import FLOOR_NEARLY_FULL_THRESHOLD


def render_floor_table(df: pd.DataFrame, available_column: str = "Available"):
    """Render per-floor availability, highlighting floors that are nearly full."""
    def color_available(val):
        try:
            v = int(val)
        except (ValueError, TypeError):
            return ""
        if v == 0:
            return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
        if v <= FLOOR_NEARLY_FULL_THRESHOLD:
            return "background-color: #fff3cd; color: #856404; font-weight: bold"
        return ""

    if available_column in df.columns:
        styled = df.style.map(color_available, subset=[available_column]).format({"Occupancy": "{:.0%}"})
        st.dataframe(styled, use_container_width=True)
    else:
        st.dataframe(df, use_container_width=True)
