from __future__ import annotations

import streamlit as st

from trade_area.config import INCOME_COLORS, STATE_PREFIX
from trade_area.data.catalog import Spending
from trade_area.data.projections import DetailProjection, detail_projection
from trade_area.ui.components.badges import capability_badge_html, chip_row_html
from trade_area.ui.components.charts import bar_chart, donut_chart, render_plotly
from trade_area.ui.components.formatting import format_currency, format_number
from trade_area.ui.components.kpi import render_kpi_cards
from trade_area.ui.pages.context import PageContext


def _render_location_pills(context: PageContext) -> None:
    controller = context.controller
    cols = st.columns(len(context.catalog))
    for col, record in zip(cols, context.catalog):
        with col:
            st.button(
                record.name,
                key=f"{STATE_PREFIX}pill_{record.id}",
                type="primary" if controller.selected_location_id == record.id else "secondary",
                on_click=controller.select_location,
                args=(record.id,),
                use_container_width=True,
            )


def _render_header(projection: DetailProjection) -> None:
    with st.container(border=True):
        title_col, badge_col = st.columns([4, 1])
        with title_col:
            st.markdown(f"## {projection.name}")
            if projection.subtitle:
                st.caption(projection.subtitle)
        with badge_col:
            st.markdown(
                capability_badge_html(projection.capability_label, projection.capability_definition),
                unsafe_allow_html=True,
            )
        if projection.details:
            st.write(projection.details)
        if projection.supports:
            st.markdown(chip_row_html(projection.supports), unsafe_allow_html=True)


def _render_spending_spotlight(spending: Spending) -> None:
    with st.container(border=True):
        st.markdown("##### Consumer Spending Spotlight (Avg Annual)")
        cols = st.columns(3)
        for col, (label, value) in zip(cols, spending.as_dict().items()):
            with col:
                st.metric(label="Dining Out" if label == "Dining" else label, value=format_currency(value))


def _render_rings(projection: DetailProjection) -> None:
    with st.container(border=True):
        st.markdown("##### Radius Breakdown")
        if projection.rings.empty:
            st.info("No radius data for this location.")
            return
        for ring in projection.rings.to_dict("records"):
            distance = ring["Distance"]
            if distance == projection.highlight_ring:
                st.markdown(f":blue[**{distance}**]")
            else:
                st.markdown(f"**{distance}**")
            pop_col, income_col = st.columns(2)
            pop_col.caption("Population")
            pop_col.markdown(f"`{format_number(ring['Population'])}`")
            income_col.caption("Med. Income")
            income_col.markdown(f"`{format_currency(ring['Median Income'])}`")


def render(context: PageContext) -> None:
    record = context.controller.current_detail_location()
    if record is None:
        st.info("No locations in the catalog.")
        return

    _render_location_pills(context)
    projection = detail_projection(record, context.catalog)

    main_col, side_col = st.columns([3, 1])
    with main_col:
        _render_header(projection)
        render_kpi_cards(projection.metrics, columns=4)

        income_col, age_col = st.columns(2)
        with income_col, st.container(border=True):
            st.markdown("##### Household Income")
            fig = bar_chart(
                projection.income_distribution,
                x="Bracket",
                y="% of Households",
                yaxis_title="% of Households",
                color_discrete_sequence=INCOME_COLORS[:1],
                hover_format=".0f",
            )
            render_plotly(fig, key=f"{STATE_PREFIX}detail_income_chart")
        with age_col, st.container(border=True):
            st.markdown("##### Age Segments")
            fig = donut_chart(
                projection.age_segments,
                names="Segment",
                values="Share",
                colors=projection.age_segments["Color"].tolist(),
            )
            render_plotly(fig, key=f"{STATE_PREFIX}detail_age_chart")

        if projection.spending is not None:
            _render_spending_spotlight(projection.spending)

    with side_col:
        _render_rings(projection)
        with st.container(border=True):
            st.markdown("##### Analyst Take")
            st.info(projection.summary)
