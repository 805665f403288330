import json
import logging
import os
from pathlib import Path
from typing import Any, List, Mapping, Optional

import streamlit as st

from trade_area.config import CATALOG_PATH_ENV, DEFAULT_CATALOG_PATH
from trade_area.data.catalog import (
    Bracket,
    CapabilityDefinition,
    Catalog,
    CatalogError,
    CoreStats,
    LocationRecord,
    RadiusRing,
    Spending,
)

logger = logging.getLogger(__name__)


def _get_secret(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec is not None and sec.load_if_toml_exists():
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        pass
    return default


def _require(raw: Any, key: str, context: str) -> Any:
    if not isinstance(raw, Mapping):
        raise CatalogError(f"{context}: expected an object, got {type(raw).__name__}")
    if key not in raw:
        raise CatalogError(f"{context}: missing required field {key!r}")
    return raw[key]


def _list(items: Any, context: str) -> List[Any]:
    if not isinstance(items, list):
        raise CatalogError(f"{context}: expected a list, got {type(items).__name__}")
    return items


def _brackets(items: Any, context: str) -> List[Bracket]:
    return [
        Bracket(
            label=str(_require(item, "label", context)),
            percentage=_require(item, "percentage", context),
        )
        for item in _list(items, context)
    ]


def _spending(raw: Any, context: str) -> Optional[Spending]:
    # null means the figures are unavailable for this location; never zero-fill
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise CatalogError(f"{context}: spending must be an object or null")
    return Spending(
        dining=_require(raw, "dining", context),
        entertainment=_require(raw, "entertainment", context),
        apparel=_require(raw, "apparel", context),
    )


def _location_from_dict(raw: Mapping[str, Any]) -> LocationRecord:
    location_id = str(_require(raw, "id", "location"))
    context = f"location {location_id!r}"
    stats = _require(raw, "stats", context)
    return LocationRecord(
        id=location_id,
        name=str(_require(raw, "name", context)),
        subtitle=raw.get("subtitle") or None,
        capability=str(_require(raw, "capability", context)),
        risk=_require(raw, "risk", context),
        summary=str(raw.get("summary", "")),
        details=str(raw.get("details", "")),
        supports=tuple(str(item) for item in _list(raw.get("supports", []), f"{context} supports")),
        stats=CoreStats(
            population=_require(stats, "population", context),
            median_income=_require(stats, "median_income", context),
            average_income=_require(stats, "average_income", context),
            high_earner_share=_require(stats, "high_earner_share", context),
            bachelors_plus=_require(stats, "bachelors_plus", context),
            median_age=_require(stats, "median_age", context),
            density_label=str(stats.get("density_label", "")),
        ),
        rings=tuple(
            RadiusRing(
                distance_label=str(_require(ring, "distance", context)),
                population=_require(ring, "population", context),
                median_income=_require(ring, "median_income", context),
            )
            for ring in _list(raw.get("rings", []), f"{context} rings")
        ),
        income_distribution=tuple(_brackets(raw.get("income_distribution", []), f"{context} income_distribution")),
        age_segments=tuple(_brackets(_require(raw, "age_segments", context), f"{context} age_segments")),
        spending=_spending(raw.get("spending"), context),
    )


def parse_catalog(payload: Mapping[str, Any]) -> Catalog:
    """Build a validated Catalog from the JSON resource structure."""
    if not isinstance(payload, Mapping):
        raise CatalogError("Catalog payload must be a JSON object")

    raw_capabilities = _require(payload, "capabilities", "catalog")
    if not isinstance(raw_capabilities, Mapping):
        raise CatalogError("catalog: capabilities must be an object keyed by letter")
    capabilities = {
        str(letter): CapabilityDefinition(
            letter=str(letter),
            title=str(_require(entry, "title", f"capability {letter!r}")),
            subtitle=str(entry.get("subtitle", "")),
            description=str(entry.get("description", "")),
            style_token=str(entry.get("style", "")),
        )
        for letter, entry in raw_capabilities.items()
    }
    locations = [_location_from_dict(raw) for raw in _list(_require(payload, "locations", "catalog"), "catalog locations")]
    return Catalog(locations, capabilities, market=str(payload.get("market", "")))


def read_catalog(path: Path) -> Catalog:
    """Read and validate a catalog file without caching."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as exc:
            raise CatalogError(f"Catalog file {path} is not valid JSON: {exc}") from exc
    catalog = parse_catalog(payload)
    logger.info("Loaded catalog %s with %d locations", path, len(catalog))
    return catalog


def resolve_catalog_path() -> Path:
    configured = _get_secret(CATALOG_PATH_ENV)
    return Path(configured).expanduser() if configured else DEFAULT_CATALOG_PATH


def load_catalog() -> Catalog:
    """Wrapper that resolves config and calls the cached implementation."""
    return _load_catalog_impl(str(resolve_catalog_path()))


@st.cache_resource(show_spinner=False)
def _load_catalog_impl(path: str) -> Catalog:
    """Cached by path; the Catalog is immutable so one instance is shared by all sessions."""
    return read_catalog(Path(path))
