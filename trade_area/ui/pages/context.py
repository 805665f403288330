from __future__ import annotations

from dataclasses import dataclass

from trade_area.data.catalog import Catalog
from trade_area.state import ViewController


@dataclass
class PageContext:
    catalog: Catalog
    controller: ViewController
