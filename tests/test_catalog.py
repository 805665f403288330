"""
Catalog model tests.

Covers parsing of the bundled JSON resource, the construction-time
invariants (unique ids, three age segments, complete spending, A-E
capability letters) and the read-only lookups on Catalog.
"""
import dataclasses

import pytest

from trade_area.data.catalog import (
    Bracket,
    CatalogError,
    InvalidLocation,
    RadiusRing,
    RiskLevel,
    canonical_capability,
    parse_capability,
    parse_miles,
)
from trade_area.data.loader import parse_catalog

# ── Bundled catalog ───────────────────────────────────────────────────────────


def test_bundled_catalog_order(catalog):
    assert catalog.ids == ("church_hill", "the_current", "willow_place", "the_village")
    assert len(catalog) == 4
    assert catalog.first.id == "church_hill"
    assert catalog.market == "Richmond, VA"


def test_only_church_hill_lacks_spending(catalog):
    missing = [record.id for record in catalog if record.spending is None]
    assert missing == ["church_hill"]


def test_age_segments_are_three_values_in_range(catalog):
    # Independent bucket estimates; only the per-value range is guaranteed.
    for record in catalog:
        assert len(record.age_segments) == 3
        for segment in record.age_segments:
            assert 0 <= segment.percentage <= 100


def test_capability_labels_are_canonical(catalog):
    assert catalog.get("church_hill").capability == "A → B"
    assert catalog.get("the_current").capability == "B → C"
    assert catalog.get("willow_place").capability == "D"
    assert catalog.get("the_village").capability == "E"


def test_capability_letters(catalog):
    church_hill = catalog.get("church_hill")
    assert church_hill.capability_primary == "A"
    assert church_hill.capability_target == "B"
    willow = catalog.get("willow_place")
    assert willow.capability_primary == "D"
    assert willow.capability_target is None


def test_risk_levels_parsed(catalog):
    assert catalog.get("the_village").risk is RiskLevel.VERY_LOW
    assert catalog.get("church_hill").risk is RiskLevel.HIGH


def test_records_are_immutable(catalog):
    record = catalog.get("willow_place")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.name = "Renamed"
    assert isinstance(record.supports, tuple)
    with pytest.raises(TypeError):
        catalog.capabilities["A"] = catalog.capabilities["B"]


# ── Lookups ───────────────────────────────────────────────────────────────────


def test_get_unknown_raises_invalid_location(catalog):
    with pytest.raises(InvalidLocation) as excinfo:
        catalog.get("nowhere")
    assert excinfo.value.location_id == "nowhere"
    assert isinstance(excinfo.value, KeyError)


def test_contains(catalog):
    assert "the_current" in catalog
    assert "nowhere" not in catalog


def test_definition_for_uses_primary_letter(catalog):
    assert catalog.definition_for("A → B").letter == "A"
    assert catalog.definition_for("E").subtitle == "Mature / Affluent"


def test_definition_for_falls_back_to_c(catalog):
    assert catalog.definition_for("not a category").letter == "C"


# ── Parsing helpers ───────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "label,expected",
    [
        ("D", ("D", None)),
        ("A → B", ("A", "B")),
        ("A→B", ("A", "B")),
        ("b->c", ("B", "C")),
    ],
)
def test_parse_capability(label, expected):
    assert parse_capability(label) == expected


def test_canonical_capability_normalises_arrow():
    assert canonical_capability("A->B") == "A → B"


@pytest.mark.parametrize("label", ["F", "A → Z", "", "AB"])
def test_parse_capability_rejects(label):
    with pytest.raises(CatalogError):
        parse_capability(label)


@pytest.mark.parametrize("raw", ["Very Low", "VeryLow", "VERY_LOW", "very low"])
def test_risk_level_accepts_label_and_name(raw):
    assert RiskLevel.parse(raw) is RiskLevel.VERY_LOW


def test_risk_level_rejects_unknown():
    with pytest.raises(CatalogError):
        RiskLevel.parse("Extreme")


def test_parse_miles():
    assert parse_miles("1 mile") == 1.0
    assert parse_miles("2 miles") == 2.0
    assert parse_miles("2.5 mi") == 2.5
    with pytest.raises(CatalogError):
        parse_miles("nearby")
    with pytest.raises(CatalogError):
        parse_miles("0 miles")


def test_ring_distance_miles():
    assert RadiusRing("5 miles", 229041, 51441).distance_miles == 5.0


def test_bracket_percentage_range():
    with pytest.raises(CatalogError):
        Bracket("Too much", 120)
    with pytest.raises(CatalogError):
        Bracket("Negative", -1)


# ── Invariants on parse ───────────────────────────────────────────────────────


def test_duplicate_ids_rejected(payload):
    payload["locations"][1]["id"] = "church_hill"
    with pytest.raises(CatalogError, match="Duplicate"):
        parse_catalog(payload)


def test_age_segment_count_enforced(payload):
    payload["locations"][0]["age_segments"].pop()
    with pytest.raises(CatalogError, match="exactly 3"):
        parse_catalog(payload)


def test_partial_spending_rejected(payload):
    del payload["locations"][1]["spending"]["apparel"]
    with pytest.raises(CatalogError, match="apparel"):
        parse_catalog(payload)


def test_non_numeric_spending_rejected(payload):
    payload["locations"][1]["spending"]["dining"] = "lots"
    with pytest.raises(CatalogError):
        parse_catalog(payload)


def test_missing_spending_key_means_unavailable(payload):
    del payload["locations"][1]["spending"]
    parsed = parse_catalog(payload)
    assert parsed.get("the_current").spending is None


def test_unknown_capability_letter_rejected(payload):
    payload["locations"][2]["capability"] = "G"
    with pytest.raises(CatalogError):
        parse_catalog(payload)


def test_missing_capability_definition_rejected(payload):
    del payload["capabilities"]["E"]
    with pytest.raises(CatalogError, match="missing"):
        parse_catalog(payload)


def test_missing_required_field_named(payload):
    del payload["locations"][3]["stats"]["median_income"]
    with pytest.raises(CatalogError, match="median_income"):
        parse_catalog(payload)


def test_unparseable_ring_rejected(payload):
    payload["locations"][0]["rings"][0]["distance"] = "somewhere"
    with pytest.raises(CatalogError):
        parse_catalog(payload)


def test_empty_location_list_is_valid(payload):
    payload["locations"] = []
    parsed = parse_catalog(payload)
    assert len(parsed) == 0
    assert parsed.first is None


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_numbers_rejected(value):
    with pytest.raises(CatalogError, match="finite"):
        Bracket("Young", value)
    with pytest.raises(CatalogError, match="finite"):
        RadiusRing("3 miles", value, 50000)


def test_market_is_read_only(catalog):
    with pytest.raises(AttributeError):
        catalog.market = "Elsewhere"
    assert catalog.market == "Richmond, VA"
