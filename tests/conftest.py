"""Shared fixtures: the bundled Richmond catalog and a mutable copy of its raw payload."""
import copy
import json
import sys
from pathlib import Path

import pytest

_PROJECT_ROOT = str(Path(__file__).resolve().parent.parent)
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from trade_area.config import DEFAULT_CATALOG_PATH  # noqa: E402
from trade_area.data.loader import read_catalog  # noqa: E402


@pytest.fixture(scope="session")
def raw_payload():
    with open(DEFAULT_CATALOG_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def payload(raw_payload):
    """Deep copy of the bundled JSON so a test can break it without leaking."""
    return copy.deepcopy(raw_payload)


@pytest.fixture(scope="session")
def catalog():
    return read_catalog(DEFAULT_CATALOG_PATH)
