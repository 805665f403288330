import pytest

from trade_area.ui.components.badges import capability_badge_html, chip_row_html, risk_badge_html
from trade_area.ui.components.formatting import (
    format_currency,
    format_number,
    format_percent,
    format_plain,
    format_thousands,
)


@pytest.mark.parametrize(
    "value,expected",
    [(44967, "$44,967"), (0, "$0"), (None, "–"), ("n/a", "–")],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [(64408, "$64k"), (143204, "$143k"), (93253, "$93k"), (None, "–")],
)
def test_format_thousands(value, expected):
    assert format_thousands(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [(33, "33%"), (44.2, "44.2%"), (None, "–")],
)
def test_format_percent(value, expected):
    assert format_percent(value) == expected


def test_format_percent_fixed_decimals():
    assert format_percent(20, decimals=1) == "20.0%"


def test_format_number_and_plain():
    assert format_number(110205) == "110,205"
    assert format_number(None) == "–"
    assert format_plain(33.3) == "33.3"
    assert format_plain(38.0) == "38"


def test_risk_badge_escapes_text():
    html = risk_badge_html("Very Low", label="<b>")
    assert "&lt;b&gt;" in html
    assert "<b>" not in html


def test_capability_badge_uses_primary_definition(catalog):
    html = capability_badge_html("A → B", catalog.definition_for("A → B"))
    assert "Category A → B" in html


def test_chip_row_escapes_items():
    html = chip_row_html(["Mixed-Use", "<script>"])
    assert "Mixed-Use" in html
    assert "&lt;script&gt;" in html


def test_format_table_renders_missing_as_dash():
    import pandas as pd

    from trade_area.ui.components.tables import format_table

    df = pd.DataFrame({"Location": ["A", "B"], "Dining": [3400, None]})
    formatted = format_table(df, {"Dining": {"type": "currency"}})
    assert list(formatted["Dining"]) == ["$3,400", "–"]
    assert df["Dining"].isna().iloc[1]


def test_low_risk_is_green_on_metric_card_and_amber_on_location_card():
    from trade_area.config import CARD_RISK_BADGE_COLORS, RISK_BADGE_COLORS
    from trade_area.ui.components.badges import card_risk_badge_html

    assert RISK_BADGE_COLORS["Low"] in risk_badge_html("Low")
    card_html = card_risk_badge_html("Low")
    assert CARD_RISK_BADGE_COLORS["Low"] in card_html
    assert CARD_RISK_BADGE_COLORS["Low"] == CARD_RISK_BADGE_COLORS["Moderate"]
    assert "Low Risk" in card_html
    assert CARD_RISK_BADGE_COLORS["Very Low"] in card_risk_badge_html("Very Low")
