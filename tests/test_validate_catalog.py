import importlib.util
import json
from pathlib import Path

import pytest

_SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "validate_catalog.py"


@pytest.fixture(scope="module")
def validate_catalog():
    spec = importlib.util.spec_from_file_location("validate_catalog", _SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_bundled_catalog_passes(validate_catalog, capsys):
    validate_catalog.main([])
    out = capsys.readouterr().out
    assert "Locations: 4" in out
    assert "with spending data: 3, without: 1" in out
    assert "Church Hill Surrounds" in out


def test_broken_catalog_exits(validate_catalog, tmp_path, payload):
    payload["locations"][0]["age_segments"] = []
    path = tmp_path / "broken.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(SystemExit, match="Catalog invalid"):
        validate_catalog.main([str(path)])
