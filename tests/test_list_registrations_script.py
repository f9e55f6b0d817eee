from __future__ import annotations

import importlib.util
import json
import sys
from pathlib import Path

import pytest

# Make the confserver package importable when running from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture()
def script():
    spec = importlib.util.spec_from_file_location(
        "list_registrations", ROOT / "scripts" / "list_registrations.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_lists_registrations(script, tmp_path, capsys):
    entries = [{"name": "Alice", "email": "a@x.com"}, {"name": "Bob", "email": "b@x.com"}]
    (tmp_path / "registrations.json").write_text(json.dumps(entries), encoding="utf-8")

    script.main(["--data-dir", str(tmp_path)])

    out = capsys.readouterr().out
    assert out.startswith("2 registration(s)")
    assert "1. Alice <a@x.com>" in out
    assert "2. Bob <b@x.com>" in out


def test_json_output_for_empty_store(script, tmp_path, capsys):
    script.main(["--data-dir", str(tmp_path), "--json"])

    assert json.loads(capsys.readouterr().out) == []
