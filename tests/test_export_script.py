"""
Tests for the headless export script.
"""

import importlib.util
from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from app.domain.models import UserPreferences
from conftest import make_entry

SCRIPT = Path(__file__).parent.parent / "scripts" / "export_entries.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("export_entries", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.parametrize("argv", [
    ["csv", "--lang", "de"],
    ["csv", "--lang=de"],
])
def test_lang_option_forms(script, argv):
    args = script.build_parser().parse_args(argv)

    assert args.format == "csv"
    assert args.lang == "de"
    assert args.output_dir is None


def test_output_dir_with_lang_after_it(script):
    args = script.build_parser().parse_args(["pdf", "out", "--lang", "en"])
    assert args.output_dir == Path("out")
    assert args.lang == "en"


def test_unknown_format_rejected(script):
    with pytest.raises(SystemExit):
        script.build_parser().parse_args(["xlsx"])


@pytest.mark.asyncio
async def test_export_in_requested_language(script, monkeypatch, tmp_path):
    entries = [make_entry(date(2026, 3, 2), "09:00", "17:00", break_minutes=30)]

    class Store:
        async def load(self):
            return entries

    async def no_db():
        return None

    settings = SimpleNamespace(preferences=UserPreferences(language="en"),
                               get_export_dir=lambda: tmp_path / "unused")
    monkeypatch.setattr(script, "get_settings", lambda: settings)
    monkeypatch.setattr(script, "init_db", no_db)
    monkeypatch.setattr(script, "EntryStore", Store)
    monkeypatch.chdir(tmp_path)

    args = script.build_parser().parse_args(["csv", "--lang", "de"])
    output = await script.export(args)

    assert output.parent == tmp_path / "unused"
    assert output.name.startswith("Arbeitszeiten_")
    assert not (tmp_path / "de").exists()
