"""
Small inline HTML snippets (badges, chips) rendered through st.markdown.
"""

from __future__ import annotations

from html import escape
from typing import Iterable, Mapping, Optional

from trade_area.config import CAPABILITY_STYLE_COLORS, CARD_RISK_BADGE_COLORS, RISK_BADGE_COLORS
from trade_area.data.catalog import CapabilityDefinition

_PILL_STYLE = (
    "display:inline-block;border-radius:999px;padding:2px 10px;"
    "font-size:0.78rem;font-weight:600;white-space:nowrap;"
)


def risk_badge_html(risk: str, label: Optional[str] = None, palette: Mapping[str, str] = RISK_BADGE_COLORS) -> str:
    color = palette.get(risk, palette["Moderate"])
    text = label if label is not None else f"Risk: {risk}"
    return f"<span style='{_PILL_STYLE}color:{color};border:1px solid {color};'>{escape(text)}</span>"


def card_risk_badge_html(risk: str) -> str:
    return risk_badge_html(risk, label=f"{risk} Risk", palette=CARD_RISK_BADGE_COLORS)


def capability_badge_html(capability: str, definition: Optional[CapabilityDefinition]) -> str:
    palette = CAPABILITY_STYLE_COLORS.get(definition.style_token if definition else "", CAPABILITY_STYLE_COLORS["green"])
    return (
        f"<span style='{_PILL_STYLE}background:{palette['background']};color:{palette['text']};'>"
        f"Category {escape(capability)}</span>"
    )


def chip_row_html(items: Iterable[str]) -> str:
    chips = "".join(
        f"<span style='{_PILL_STYLE}font-weight:500;background:#f1f5f9;color:#475569;"
        f"border:1px solid #e2e8f0;margin:0 6px 6px 0;'>{escape(item)}</span>"
        for item in items
    )
    return f"<div style='display:flex;flex-wrap:wrap;'>{chips}</div>"
