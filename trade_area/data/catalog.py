"""
Immutable record types for the location catalog.

Every record validates itself on construction so that a malformed catalog
fails at load time instead of part-way through a render. Nothing in here
mutates after `__post_init__`; the catalog is shared read-only by every
session.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

CAPABILITY_LETTERS: Tuple[str, ...] = ("A", "B", "C", "D", "E")
FALLBACK_CAPABILITY = "C"
AGE_SEGMENT_COUNT = 3
TRANSITION_ARROW = " → "

_CAPABILITY_PATTERN = re.compile(r"^\s*([A-Za-z])\s*(?:(?:→|->)\s*([A-Za-z]))?\s*$")
_MILES_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(?:mi|mile|miles)?\s*$", re.IGNORECASE)


class CatalogError(ValueError):
    """Catalog data violates a structural invariant."""


class InvalidLocation(KeyError):
    """A location id is not present in the catalog."""

    def __init__(self, location_id: object) -> None:
        super().__init__(location_id)
        self.location_id = location_id

    def __str__(self) -> str:
        return f"Unknown location id: {self.location_id!r}"


class RiskLevel(str, Enum):
    VERY_LOW = "Very Low"
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"

    @classmethod
    def parse(cls, raw: object) -> "RiskLevel":
        """Accept the display label ("Very Low"), the member name or a squashed form ("VeryLow")."""
        if isinstance(raw, cls):
            return raw
        squashed = re.sub(r"[\s_-]+", "", str(raw or "")).lower()
        for member in cls:
            if squashed in (member.value.replace(" ", "").lower(), member.name.replace("_", "").lower()):
                return member
        raise CatalogError(f"Unknown risk level: {raw!r}")


def parse_capability(label: str) -> Tuple[str, Optional[str]]:
    """Split a capability label into (primary, target) letters.

    "D" -> ("D", None); "A → B", "A→B" and "A->B" -> ("A", "B").
    """
    match = _CAPABILITY_PATTERN.match(str(label or ""))
    if not match:
        raise CatalogError(f"Unrecognised capability category: {label!r}")
    primary = match.group(1).upper()
    target = match.group(2).upper() if match.group(2) else None
    for letter in (primary, target):
        if letter is not None and letter not in CAPABILITY_LETTERS:
            raise CatalogError(f"Capability category {letter!r} is outside A-E")
    return primary, target


def canonical_capability(label: str) -> str:
    primary, target = parse_capability(label)
    if target is None:
        return primary
    return f"{primary}{TRANSITION_ARROW}{target}"


def parse_miles(label: str) -> float:
    """Distance in miles from a ring label such as "2 miles" or "1 mile"."""
    match = _MILES_PATTERN.match(str(label or ""))
    if not match:
        raise CatalogError(f"Cannot read a distance from ring label {label!r}")
    miles = float(match.group(1))
    if miles <= 0:
        raise CatalogError(f"Ring distance must be positive: {label!r}")
    return miles


def _check_number(value: object, field_name: str, minimum: Optional[float] = 0.0, maximum: Optional[float] = None) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CatalogError(f"{field_name} must be numeric, got {value!r}")
    if not math.isfinite(value):
        raise CatalogError(f"{field_name} must be finite, got {value!r}")
    if minimum is not None and value < minimum:
        raise CatalogError(f"{field_name} must be >= {minimum}, got {value!r}")
    if maximum is not None and value > maximum:
        raise CatalogError(f"{field_name} must be <= {maximum}, got {value!r}")


def _check_percentage(value: object, field_name: str) -> None:
    _check_number(value, field_name, minimum=0.0, maximum=100.0)


@dataclass(frozen=True)
class Bracket:
    """A labelled share of households or population, in percent."""

    label: str
    percentage: float

    def __post_init__(self) -> None:
        _check_percentage(self.percentage, f"Bracket {self.label!r}")


@dataclass(frozen=True)
class RadiusRing:
    distance_label: str
    population: int
    median_income: float

    def __post_init__(self) -> None:
        parse_miles(self.distance_label)
        _check_number(self.population, f"Ring {self.distance_label!r} population")
        _check_number(self.median_income, f"Ring {self.distance_label!r} median income")

    @property
    def distance_miles(self) -> float:
        return parse_miles(self.distance_label)


@dataclass(frozen=True)
class Spending:
    """Average annual household spend on discretionary categories, in dollars."""

    dining: float
    entertainment: float
    apparel: float

    def __post_init__(self) -> None:
        for name in ("dining", "entertainment", "apparel"):
            _check_number(getattr(self, name), f"Spending {name}")

    def as_dict(self) -> Dict[str, float]:
        return {
            "Dining": self.dining,
            "Entertainment": self.entertainment,
            "Apparel": self.apparel,
        }


@dataclass(frozen=True)
class CoreStats:
    population: int
    median_income: float
    average_income: float
    high_earner_share: float
    bachelors_plus: float
    median_age: float
    density_label: str

    def __post_init__(self) -> None:
        _check_number(self.population, "population")
        _check_number(self.median_income, "median_income")
        _check_number(self.average_income, "average_income")
        _check_percentage(self.high_earner_share, "high_earner_share")
        _check_percentage(self.bachelors_plus, "bachelors_plus")
        _check_number(self.median_age, "median_age")


@dataclass(frozen=True)
class CapabilityDefinition:
    letter: str
    title: str
    subtitle: str
    description: str
    style_token: str

    def __post_init__(self) -> None:
        if self.letter not in CAPABILITY_LETTERS:
            raise CatalogError(f"Capability definition letter {self.letter!r} is not one of {CAPABILITY_LETTERS}")


@dataclass(frozen=True)
class LocationRecord:
    id: str
    name: str
    capability: str
    risk: RiskLevel
    summary: str
    details: str
    supports: Tuple[str, ...]
    stats: CoreStats
    rings: Tuple[RadiusRing, ...]
    income_distribution: Tuple[Bracket, ...]
    age_segments: Tuple[Bracket, ...]
    spending: Optional[Spending] = None
    subtitle: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise CatalogError("Location id must be a non-empty string")
        object.__setattr__(self, "capability", canonical_capability(self.capability))
        object.__setattr__(self, "risk", RiskLevel.parse(self.risk))
        object.__setattr__(self, "supports", tuple(self.supports))
        object.__setattr__(self, "rings", tuple(self.rings))
        object.__setattr__(self, "income_distribution", tuple(self.income_distribution))
        object.__setattr__(self, "age_segments", tuple(self.age_segments))
        if len(self.age_segments) != AGE_SEGMENT_COUNT:
            raise CatalogError(
                f"Location {self.id!r} must have exactly {AGE_SEGMENT_COUNT} age segments, "
                f"got {len(self.age_segments)}"
            )
        if self.spending is not None and not isinstance(self.spending, Spending):
            raise CatalogError(f"Location {self.id!r} spending must be a Spending record or None")

    @property
    def capability_primary(self) -> str:
        return parse_capability(self.capability)[0]

    @property
    def capability_target(self) -> Optional[str]:
        return parse_capability(self.capability)[1]


class Catalog:
    """Ordered, read-only set of locations plus the capability framework lookup."""

    def __init__(
        self,
        locations: Iterable[LocationRecord],
        capabilities: Mapping[str, CapabilityDefinition],
        market: str = "",
    ) -> None:
        records = tuple(locations)
        seen: set = set()
        duplicates = []
        for record in records:
            if record.id in seen:
                duplicates.append(record.id)
            seen.add(record.id)
        if duplicates:
            raise CatalogError(f"Duplicate location ids: {sorted(set(duplicates))}")

        definitions = dict(capabilities)
        missing = [letter for letter in CAPABILITY_LETTERS if letter not in definitions]
        if missing:
            raise CatalogError(f"Capability definitions missing for: {missing}")
        for key, definition in definitions.items():
            if key != definition.letter:
                raise CatalogError(f"Capability definition keyed {key!r} describes {definition.letter!r}")

        self._market = market
        self._locations = records
        self._index = MappingProxyType({record.id: record for record in records})
        self._capabilities = MappingProxyType(
            {letter: definitions[letter] for letter in CAPABILITY_LETTERS}
        )

    def __iter__(self) -> Iterator[LocationRecord]:
        return iter(self._locations)

    def __len__(self) -> int:
        return len(self._locations)

    def __contains__(self, location_id: object) -> bool:
        return location_id in self._index

    def __repr__(self) -> str:
        return f"Catalog(ids={list(self.ids)!r})"

    @property
    def market(self) -> str:
        return self._market

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(record.id for record in self._locations)

    @property
    def first(self) -> Optional[LocationRecord]:
        return self._locations[0] if self._locations else None

    @property
    def capabilities(self) -> Mapping[str, CapabilityDefinition]:
        return self._capabilities

    def get(self, location_id: str) -> LocationRecord:
        try:
            return self._index[location_id]
        except (KeyError, TypeError):
            raise InvalidLocation(location_id) from None

    def definition_for(self, capability: str) -> CapabilityDefinition:
        """Definition for the primary letter of a capability label, defaulting to category C."""
        try:
            primary, _ = parse_capability(capability)
        except CatalogError:
            primary = FALLBACK_CAPABILITY
        return self._capabilities.get(primary, self._capabilities[FALLBACK_CAPABILITY])
