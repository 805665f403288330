"""
Layout helpers for the Streamlit application (page setup, navigation bar, footer).
"""

from __future__ import annotations

import streamlit as st

from trade_area.config import APP_TITLE, PAGE_TITLE, STATE_PREFIX, TABS
from trade_area.data.catalog import Catalog
from trade_area.state import View, ViewController
from trade_area.ui.components.badges import capability_badge_html


def setup_page() -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title=PAGE_TITLE,
        layout="wide",
        page_icon=":chart_with_upwards_trend:",
    )
    _inject_base_styles()


def render_navigation(controller: ViewController, market: str = "") -> None:
    """Title plus one button per tab; the active tab is drawn as a primary button."""
    title_col, nav_col = st.columns([3, 2])
    with title_col:
        st.title(APP_TITLE)
        if market:
            st.caption(f"Market: {market}")
    with nav_col:
        tab_cols = st.columns(len(TABS))
        for col, tab in zip(tab_cols, TABS):
            with col:
                st.button(
                    tab.label,
                    key=f"{STATE_PREFIX}nav_{tab.key}",
                    type="primary" if controller.active_view == View(tab.key) else "secondary",
                    on_click=controller.navigate,
                    args=(tab.key,),
                    use_container_width=True,
                )
    st.divider()


def render_capability_reference(catalog: Catalog) -> None:
    st.divider()
    st.caption("MARKET CAPABILITY FRAMEWORK REFERENCE")
    definitions = list(catalog.capabilities.values())
    cols = st.columns(len(definitions))
    for col, definition in zip(cols, definitions):
        with col, st.container(border=True):
            st.markdown(capability_badge_html(definition.letter, definition), unsafe_allow_html=True)
            st.markdown(f"**{definition.subtitle}**")
            st.caption(definition.description)


def _inject_base_styles() -> None:
    st.markdown(
        """
        <style>
        div[data-testid="stMetricValue"] {font-size: 1.6rem;}
        div[data-testid="stVerticalBlockBorderWrapper"] {border-radius: 12px;}
        </style>
        """,
        unsafe_allow_html=True,
    )
