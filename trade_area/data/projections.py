"""
Pure projections from catalog records into chart-ready frames.

Nothing here touches Streamlit state; every function is total for any
number of locations (including none) and returns empty frames with the
expected columns when there is nothing to show.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from trade_area.config import AGE_SEGMENT_COLORS, HEADLINE_RADIUS_LABEL, HEADLINE_RADIUS_MILES
from trade_area.data.catalog import CapabilityDefinition, Catalog, LocationRecord, Spending
from trade_area.ui.components.formatting import format_percent, format_plain, format_thousands
from trade_area.ui.components.kpi import KpiCard

AGE_STACK_LABELS: Tuple[str, str, str] = ("Young (15-34)", "Prime (35-54)", "Mature (55+)")

INCOME_COLUMNS = ["Location", "Median Income", "Avg Income"]
AGE_COLUMNS = ["Location", *AGE_STACK_LABELS]
SPENDING_COLUMNS = ["Location", "Dining", "Entertainment", "Apparel"]
INCOME_DISTRIBUTION_COLUMNS = ["Bracket", "% of Households"]
AGE_SEGMENT_COLUMNS = ["Segment", "Share", "Color"]
RING_COLUMNS = ["Distance", "Miles", "Population", "Median Income"]
COMPARISON_TABLE_COLUMNS = [
    "Location",
    "Capability",
    "Risk",
    "Population (3mi)",
    "Median Income",
    "Avg Income",
    "High Earner Share %",
    "Bachelor's+ %",
    "Median Age",
    "Density",
    "Dining",
    "Entertainment",
    "Apparel",
]


@dataclass
class ComparisonProjection:
    income: pd.DataFrame
    age: pd.DataFrame
    spending: pd.DataFrame
    # Names of locations left out of the spending frame because they have no figures
    spending_excluded: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LocationCard:
    id: str
    name: str
    risk: str
    capability: str
    median_income_display: str
    median_age_display: str


@dataclass
class DetailProjection:
    location_id: str
    name: str
    subtitle: Optional[str]
    capability_label: str
    capability_definition: Optional[CapabilityDefinition]
    details: str
    summary: str
    supports: Tuple[str, ...]
    metrics: List[KpiCard]
    income_distribution: pd.DataFrame
    age_segments: pd.DataFrame
    rings: pd.DataFrame
    spending: Optional[Spending] = None
    highlight_ring: Optional[str] = None


def comparison_projection(locations: Iterable[LocationRecord]) -> ComparisonProjection:
    """Income, age and spending comparison frames across every location."""
    records = list(locations)

    income = pd.DataFrame(
        [
            {
                "Location": record.name,
                "Median Income": record.stats.median_income,
                "Avg Income": record.stats.average_income,
            }
            for record in records
        ],
        columns=INCOME_COLUMNS,
    )

    age_rows = []
    for record in records:
        row = {"Location": record.name}
        for label, segment in zip(AGE_STACK_LABELS, record.age_segments):
            row[label] = segment.percentage
        age_rows.append(row)
    age = pd.DataFrame(age_rows, columns=AGE_COLUMNS)

    spending_rows = []
    excluded = []
    for record in records:
        if record.spending is None:
            excluded.append(record.name)
            continue
        spending_rows.append({"Location": record.name, **record.spending.as_dict()})
    spending = pd.DataFrame(spending_rows, columns=SPENDING_COLUMNS)

    return ComparisonProjection(
        income=income,
        age=age,
        spending=spending,
        spending_excluded=tuple(excluded),
    )


def location_cards(locations: Iterable[LocationRecord]) -> List[LocationCard]:
    return [
        LocationCard(
            id=record.id,
            name=record.name,
            risk=record.risk.value,
            capability=record.capability,
            median_income_display=format_thousands(record.stats.median_income),
            median_age_display=format_plain(record.stats.median_age),
        )
        for record in locations
    ]


def comparison_table(locations: Iterable[LocationRecord]) -> pd.DataFrame:
    """Flat table of headline stats for export. Missing spending stays blank."""
    rows = []
    for record in locations:
        stats = record.stats
        spending = record.spending.as_dict() if record.spending is not None else {}
        rows.append(
            {
                "Location": record.name,
                "Capability": record.capability,
                "Risk": record.risk.value,
                "Population (3mi)": stats.population,
                "Median Income": stats.median_income,
                "Avg Income": stats.average_income,
                "High Earner Share %": stats.high_earner_share,
                "Bachelor's+ %": stats.bachelors_plus,
                "Median Age": stats.median_age,
                "Density": stats.density_label,
                "Dining": spending.get("Dining"),
                "Entertainment": spending.get("Entertainment"),
                "Apparel": spending.get("Apparel"),
            }
        )
    return pd.DataFrame(rows, columns=COMPARISON_TABLE_COLUMNS)


def _metric_cards(record: LocationRecord) -> List[KpiCard]:
    stats = record.stats
    return [
        KpiCard(
            label="Median Age",
            value=stats.median_age,
            value_display=format_plain(stats.median_age),
            help_text=HEADLINE_RADIUS_LABEL,
        ),
        KpiCard(
            label="Avg HH Income",
            value=stats.average_income,
            value_display=format_thousands(stats.average_income),
            help_text="Mean (vs Median)",
        ),
        KpiCard(
            label="Education (Bach+)",
            value=stats.bachelors_plus,
            value_display=format_percent(stats.bachelors_plus),
            help_text="Pop 25+",
        ),
        KpiCard(
            label="Discretionary Risk",
            value_display=record.risk.value,
            trend=record.risk.value,
        ),
    ]


def _ring_frame(record: LocationRecord) -> pd.DataFrame:
    rings = pd.DataFrame(
        [
            {
                "Distance": ring.distance_label,
                "Miles": ring.distance_miles,
                "Population": ring.population,
                "Median Income": ring.median_income,
            }
            for ring in record.rings
        ],
        columns=RING_COLUMNS,
    )
    return rings.sort_values("Miles", kind="stable").reset_index(drop=True)


def detail_projection(record: LocationRecord, catalog: Optional[Catalog] = None) -> DetailProjection:
    """Everything the detail view renders for one location.

    The capability definition is only resolved when a catalog is supplied.
    """
    income_distribution = pd.DataFrame(
        [{"Bracket": bracket.label, "% of Households": bracket.percentage} for bracket in record.income_distribution],
        columns=INCOME_DISTRIBUTION_COLUMNS,
    )
    age_segments = pd.DataFrame(
        [
            {
                "Segment": segment.label,
                "Share": segment.percentage,
                "Color": AGE_SEGMENT_COLORS[idx % len(AGE_SEGMENT_COLORS)],
            }
            for idx, segment in enumerate(record.age_segments)
        ],
        columns=AGE_SEGMENT_COLUMNS,
    )
    rings = _ring_frame(record)
    headline = rings[rings["Miles"] == HEADLINE_RADIUS_MILES]
    highlight_ring = str(headline["Distance"].iloc[0]) if not headline.empty else None

    return DetailProjection(
        location_id=record.id,
        name=record.name,
        subtitle=record.subtitle,
        capability_label=record.capability,
        capability_definition=catalog.definition_for(record.capability) if catalog is not None else None,
        details=record.details,
        summary=record.summary,
        supports=record.supports,
        metrics=_metric_cards(record),
        income_distribution=income_distribution,
        age_segments=age_segments,
        rings=rings,
        spending=record.spending,
        highlight_ring=highlight_ring,
    )


def youngest_skew(comparison: ComparisonProjection) -> Optional[Tuple[str, float]]:
    """Location with the largest under-35 share, as (name, share)."""
    young_label = AGE_STACK_LABELS[0]
    age = comparison.age.dropna(subset=[young_label])
    if age.empty:
        return None
    row = age.loc[age[young_label].astype(float).idxmax()]
    return str(row["Location"]), float(row[young_label])
