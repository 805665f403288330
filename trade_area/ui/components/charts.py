"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st


DEFAULT_TEMPLATE = "plotly_white"
DEFAULT_COLOR_SEQUENCE = [
    "#3b82f6",  # blue for income metrics
    "#93c5fd",
    "#818cf8",  # indigo for age metrics
    "#f472b6",  # pink/purple/green for spending
    "#a78bfa",
    "#34d399",
]


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    yaxis_tickformat: Optional[str] = None,
    legend_title: Optional[str] = None,
    xaxis_tickformat: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        colorway=DEFAULT_COLOR_SEQUENCE,
        title=title,
        legend_title=legend_title,
        margin=dict(l=40, r=20, t=60, b=40),
        legend=dict(orientation="h", yanchor="bottom", y=-0.3, xanchor="center", x=0.5),
    )
    if yaxis_title is not None:
        fig.update_yaxes(title=yaxis_title)
    if yaxis_tickformat:
        fig.update_yaxes(tickformat=yaxis_tickformat)
    if xaxis_tickformat:
        fig.update_xaxes(tickformat=xaxis_tickformat)
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, zeroline=True)
    return fig


def render_plotly(fig: go.Figure, key: Optional[str] = None) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False}, key=key)


def to_long(df: pd.DataFrame, id_col: str, value_cols: List[str], var_name: str, value_name: str) -> pd.DataFrame:
    """Melt a wide comparison frame into the long form Plotly Express groups by colour."""
    if df.empty:
        return pd.DataFrame(columns=[id_col, var_name, value_name])
    return df.melt(id_vars=[id_col], value_vars=value_cols, var_name=var_name, value_name=value_name)


def bar_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    color: Optional[str] = None,
    barmode: str = "group",
    orientation: str = "v",
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    yaxis_tickformat: Optional[str] = None,
    xaxis_tickformat: Optional[str] = None,
    category_orders: Optional[Dict[str, List[str]]] = None,
    color_discrete_map: Optional[Dict[str, str]] = None,
    color_discrete_sequence: Optional[List[str]] = None,
    text_auto: bool = False,
    hover_format: Optional[str] = None,
) -> go.Figure:
    fig = px.bar(
        df,
        x=x,
        y=y,
        color=color,
        barmode=barmode,
        orientation=orientation,
        category_orders=category_orders,
        color_discrete_map=color_discrete_map,
        color_discrete_sequence=color_discrete_sequence,
        text_auto=text_auto,
    )
    fig = _configure_layout(
        fig,
        title,
        yaxis_title,
        yaxis_tickformat,
        legend_title="",
        xaxis_tickformat=xaxis_tickformat,
    )
    if text_auto:
        fig.update_traces(textposition="outside", cliponaxis=False)
    if hover_format:
        label_axis, value_axis = ("y", "x") if orientation == "h" else ("x", "y")
        series = "%{fullData.name}: " if color else ""
        fig.update_traces(
            hovertemplate=f"%{{{label_axis}}}<br>{series}%{{{value_axis}:{hover_format}}}<extra></extra>"
        )
    return fig


def donut_chart(
    df: pd.DataFrame,
    names: str,
    values: str,
    colors: Optional[List[str]] = None,
    title: Optional[str] = None,
    hole: float = 0.6,
) -> go.Figure:
    fig = go.Figure(
        go.Pie(
            labels=df[names].tolist(),
            values=df[values].tolist(),
            hole=hole,
            sort=False,
            marker=dict(colors=colors) if colors else None,
        )
    )
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        title=title,
        margin=dict(l=20, r=20, t=40, b=20),
        legend=dict(orientation="h", yanchor="bottom", y=-0.3, xanchor="center", x=0.5),
    )
    return fig
