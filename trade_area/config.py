"""
Application-wide configuration constants.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


APP_TITLE = "Richmond Trade Area Analysis"
PAGE_TITLE = "Richmond Trade Area Analysis"

OVERVIEW_TAB = "overview"
DETAILS_TAB = "details"

# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig(OVERVIEW_TAB, "Overview"),
    TabConfig(DETAILS_TAB, "Location Details"),
]

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "richmond_catalog.json"
CATALOG_PATH_ENV = "TRADE_AREA_CATALOG_PATH"
LOG_LEVEL_ENV = "LOG_LEVEL"

# Prefix for every st.session_state key owned by this app
STATE_PREFIX = "ta_"

# Radius all headline stats are measured on
HEADLINE_RADIUS_LABEL = "3 Mile Radius"
HEADLINE_RADIUS_MILES = 3.0

INCOME_COLORS = ["#3b82f6", "#93c5fd"]
AGE_SEGMENT_COLORS = ["#818cf8", "#6366f1", "#3730a3"]
SPENDING_COLORS: Dict[str, str] = {
    "Dining": "#f472b6",
    "Entertainment": "#a78bfa",
    "Apparel": "#34d399",
}

# Detail metric card: Low and Very Low both read as safe
RISK_BADGE_COLORS: Dict[str, str] = {
    "Very Low": "#059669",
    "Low": "#059669",
    "Moderate": "#d97706",
    "High": "#dc2626",
}
# Overview location cards: only Very Low is green
CARD_RISK_BADGE_COLORS: Dict[str, str] = {
    "Very Low": "#16a34a",
    "Low": "#ca8a04",
    "Moderate": "#ca8a04",
    "High": "#dc2626",
}

# Capability style tokens from the catalog map onto badge colours
CAPABILITY_STYLE_COLORS: Dict[str, Dict[str, str]] = {
    "gray": {"background": "#e5e7eb", "text": "#1f2937"},
    "blue": {"background": "#dbeafe", "text": "#1e40af"},
    "green": {"background": "#dcfce7", "text": "#166534"},
    "purple": {"background": "#f3e8ff", "text": "#6b21a8"},
    "indigo": {"background": "#e0e7ff", "text": "#3730a3"},
}

SPENDING_SOURCE_LABEL = "ESRI 2023 Estimates"
