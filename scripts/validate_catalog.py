"""Quick validation script for a location catalog file.

Run with `python scripts/validate_catalog.py [path]` to ensure the catalog
parses, satisfies its invariants, and projects cleanly. Defaults to the
path configured by TRADE_AREA_CATALOG_PATH (or the bundled catalog).
"""

from __future__ import annotations

import sys
from pathlib import Path

from trade_area.data.catalog import CatalogError
from trade_area.data.loader import read_catalog, resolve_catalog_path
from trade_area.data.projections import comparison_projection, detail_projection


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0]) if args else resolve_catalog_path()

    try:
        catalog = read_catalog(path)
    except (CatalogError, FileNotFoundError) as exc:
        raise SystemExit(f"Catalog invalid: {exc}")

    comparison = comparison_projection(catalog)
    for record in catalog:
        detail_projection(record, catalog)

    with_spending = len(comparison.spending)
    print(
        f"Catalog validation passed. Locations: {len(catalog)}, "
        f"with spending data: {with_spending}, without: {len(catalog) - with_spending}"
    )
    if comparison.spending_excluded:
        print("Excluded from spending comparison:", ", ".join(comparison.spending_excluded))


if __name__ == "__main__":
    main()
