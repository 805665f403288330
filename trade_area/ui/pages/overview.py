from __future__ import annotations

from typing import List

import streamlit as st

from trade_area.config import AGE_SEGMENT_COLORS, INCOME_COLORS, SPENDING_COLORS, SPENDING_SOURCE_LABEL, STATE_PREFIX
from trade_area.data.projections import (
    AGE_STACK_LABELS,
    ComparisonProjection,
    LocationCard,
    comparison_projection,
    comparison_table,
    location_cards,
    youngest_skew,
)
from trade_area.ui.components.badges import card_risk_badge_html
from trade_area.ui.components.charts import bar_chart, render_plotly, to_long
from trade_area.ui.components.tables import render_table
from trade_area.ui.pages.context import PageContext

CARDS_PER_ROW = 4


def _render_location_cards(cards: List[LocationCard], context: PageContext) -> None:
    for idx in range(0, len(cards), CARDS_PER_ROW):
        row_cards = cards[idx: idx + CARDS_PER_ROW]
        cols = st.columns(CARDS_PER_ROW)
        for col, card in zip(cols, row_cards):
            with col, st.container(border=True):
                st.markdown(f"#### {card.name}")
                st.markdown(card_risk_badge_html(card.risk), unsafe_allow_html=True)
                st.markdown(
                    f"Capability: **{card.capability}**  \n"
                    f"Med. Income: **{card.median_income_display}**  \n"
                    f"Median Age: **{card.median_age_display}**"
                )
                st.button(
                    "View Analysis →",
                    key=f"{STATE_PREFIX}card_{card.id}",
                    on_click=context.controller.select_location,
                    args=(card.id,),
                    use_container_width=True,
                )


def _render_income_chart(comparison: ComparisonProjection) -> None:
    st.markdown("##### Income Comparison (3 Mile Radius)")
    income_long = to_long(
        comparison.income,
        id_col="Location",
        value_cols=["Median Income", "Avg Income"],
        var_name="Measure",
        value_name="Income",
    )
    fig = bar_chart(
        income_long,
        x="Income",
        y="Location",
        color="Measure",
        orientation="h",
        xaxis_tickformat="$~s",
        yaxis_title="",
        color_discrete_sequence=INCOME_COLORS,
        hover_format="$,.0f",
    )
    render_plotly(fig, key=f"{STATE_PREFIX}income_chart")


def _render_age_chart(comparison: ComparisonProjection) -> None:
    st.markdown("##### Age Distribution Profile")
    age_long = to_long(
        comparison.age,
        id_col="Location",
        value_cols=list(AGE_STACK_LABELS),
        var_name="Segment",
        value_name="Share",
    )
    fig = bar_chart(
        age_long,
        x="Location",
        y="Share",
        color="Segment",
        barmode="stack",
        yaxis_title="% of population",
        category_orders={"Segment": list(AGE_STACK_LABELS)},
        color_discrete_map=dict(zip(AGE_STACK_LABELS, AGE_SEGMENT_COLORS)),
        hover_format=".1f",
    )
    render_plotly(fig, key=f"{STATE_PREFIX}age_chart")

    skew = youngest_skew(comparison)
    if skew is not None:
        name, share = skew
        st.caption(f"Note: {name} skews significantly younger ({int(share)}% under 35).")


def _render_spending_chart(comparison: ComparisonProjection) -> None:
    header_col, source_col = st.columns([4, 1])
    with header_col:
        st.markdown("##### Discretionary Spending Power (Avg Household / Year)")
    with source_col:
        st.caption(SPENDING_SOURCE_LABEL)

    if comparison.spending.empty:
        st.info("No locations have comparable spending data.")
    else:
        spending_long = to_long(
            comparison.spending,
            id_col="Location",
            value_cols=list(SPENDING_COLORS),
            var_name="Category",
            value_name="Spend",
        )
        fig = bar_chart(
            spending_long,
            x="Location",
            y="Spend",
            color="Category",
            yaxis_tickformat="$,.0f",
            yaxis_title="",
            color_discrete_map=SPENDING_COLORS,
            hover_format="$,.0f",
        )
        render_plotly(fig, key=f"{STATE_PREFIX}spending_chart")

    if comparison.spending_excluded:
        st.caption(
            f"*{', '.join(comparison.spending_excluded)} excluded from direct comparison "
            "due to differing data source methodology."
        )


def render(context: PageContext) -> None:
    catalog = context.catalog
    if not len(catalog):
        st.info("No locations in the catalog.")
        return

    _render_location_cards(location_cards(catalog), context)

    comparison = comparison_projection(catalog)
    income_col, age_col = st.columns(2)
    with income_col, st.container(border=True):
        _render_income_chart(comparison)
    with age_col, st.container(border=True):
        _render_age_chart(comparison)

    with st.container(border=True):
        _render_spending_chart(comparison)

    with st.expander("Comparison Table", expanded=False):
        render_table(
            comparison_table(catalog),
            column_config={
                "Population (3mi)": {"type": "number"},
                "Median Income": {"type": "currency"},
                "Avg Income": {"type": "currency"},
                "High Earner Share %": {"type": "percent"},
                "Bachelor's+ %": {"type": "percent"},
                "Dining": {"type": "currency"},
                "Entertainment": {"type": "currency"},
                "Apparel": {"type": "currency"},
            },
            export_file_name="trade_area_comparison.csv",
            key=f"{STATE_PREFIX}comparison_download",
        )
