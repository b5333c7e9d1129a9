"""Plotly chart builders for the Hotel Room Reservation System."""

import plotly.graph_objects as go
import pandas as pd
from typing import List

from config.defaults import (
    ROOMS_PER_STANDARD_FLOOR,
    COLOR_AVAILABLE, COLOR_OCCUPIED, COLOR_JUST_BOOKED, COLOR_EMPTY_SLOT,
)

# Cell states for the occupancy grid
_EMPTY, _AVAILABLE, _OCCUPIED, _JUST_BOOKED = 0, 1, 2, 3


def occupancy_grid(inventory_df: pd.DataFrame, title: str = "Hotel Occupancy") -> go.Figure:
    """Floor-by-position grid, top floor first, lift landing on the left.

    Floors with fewer rooms than the widest floor show blank slots.
    """
    floors = sorted(inventory_df["Floor"].unique(), reverse=True)
    positions = list(range(1, ROOMS_PER_STANDARD_FLOOR + 1))

    cells = {}
    for _, row in inventory_df.iterrows():
        if row["Just Booked"]:
            state = _JUST_BOOKED
        elif row["Occupied"]:
            state = _OCCUPIED
        else:
            state = _AVAILABLE
        cells[(row["Floor"], row["Position"])] = (state, str(row["Room"]))

    z: List[List[int]] = []
    text: List[List[str]] = []
    for floor in floors:
        z.append([cells.get((floor, p), (_EMPTY, ""))[0] for p in positions])
        text.append([cells.get((floor, p), (_EMPTY, ""))[1] for p in positions])

    # Discrete colour bands for the four cell states
    colorscale = [
        [0.00, COLOR_EMPTY_SLOT], [0.25, COLOR_EMPTY_SLOT],
        [0.25, COLOR_AVAILABLE], [0.50, COLOR_AVAILABLE],
        [0.50, COLOR_OCCUPIED], [0.75, COLOR_OCCUPIED],
        [0.75, COLOR_JUST_BOOKED], [1.00, COLOR_JUST_BOOKED],
    ]

    fig = go.Figure(data=go.Heatmap(
        z=z,
        x=[str(p) for p in positions],
        y=[f"Floor {f}" for f in floors],
        text=text,
        texttemplate="%{text}",
        colorscale=colorscale,
        zmin=-0.5,
        zmax=3.5,
        showscale=False,
        xgap=4,
        ygap=4,
        hovertemplate="%{y}<br>Room %{text}<extra></extra>",
    ))
    fig.update_layout(
        title=title,
        xaxis_title="Position from lift",
        height=max(400, len(floors) * 45),
        yaxis_type="category",
        yaxis_autorange="reversed",
    )
    return fig


def occupancy_donut(occupied: int, total: int, title: str = "Overall Occupancy") -> go.Figure:
    """Donut chart showing occupied vs available rooms."""
    available = total - occupied
    fig = go.Figure(data=[go.Pie(
        labels=["Occupied", "Available"],
        values=[occupied, available],
        hole=0.6,
        marker_colors=[COLOR_OCCUPIED, COLOR_AVAILABLE],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{occupied}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig
