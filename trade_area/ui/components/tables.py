"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

import pandas as pd
import streamlit as st

from trade_area.ui.components.formatting import format_currency, format_number, format_percent


def _formatter(config: Dict[str, str]) -> Optional[Callable[[object], str]]:
    fmt_type = config.get("type")
    if fmt_type == "currency":
        decimals = int(config.get("decimals", 0))
        return lambda v: format_currency(v, decimals=decimals)
    if fmt_type == "percent":
        return lambda v: format_percent(v)
    if fmt_type == "number":
        decimals = int(config.get("decimals", 0))
        return lambda v: format_number(v, decimals=decimals)
    return None


def format_table(df: pd.DataFrame, column_config: Optional[Dict[str, Dict[str, str]]] = None) -> pd.DataFrame:
    """Return a display copy of `df`; missing values render as a dash, never as zero."""
    formatted_df = df.copy()
    for column, config in (column_config or {}).items():
        if column not in formatted_df.columns:
            continue
        fmt = _formatter(config)
        if fmt is None:
            continue
        formatted_df[column] = formatted_df[column].apply(lambda v, fmt=fmt: "–" if pd.isna(v) else fmt(v))
    return formatted_df


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Dict[str, str]]] = None,
    height: Optional[int] = None,
    show_index: bool = False,
    export_file_name: str = "export.csv",
    key: Optional[str] = None,
) -> None:
    if df.empty:
        st.info("No data to display.")
        return

    dataframe_kwargs = {"height": height} if height else {}
    st.dataframe(
        format_table(df, column_config),
        use_container_width=True,
        hide_index=not show_index,
        **dataframe_kwargs,
    )

    csv_bytes = df.to_csv(index=show_index).encode("utf-8")
    st.download_button(
        "Download CSV",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
        key=key,
    )
