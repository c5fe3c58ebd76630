import sqlite3

from src.components.palettes import GetPalettesInput, ImportPalettesInput, run_get, run_import
from src.rules.models import PaletteRules


def test_get_missing_returns_default(sqlite_store):
    assert sqlite_store.get("nope") is None
    assert sqlite_store.get("nope", {}) == {}


def test_set_then_get_preserves_order(sqlite_store):
    value = {"b": {"z": "#000001", "a": "#000002"}, "a": {"m": "#000003"}}
    sqlite_store.set("color_palette_data", value)

    loaded = sqlite_store.get("color_palette_data")
    assert loaded == value
    assert list(loaded) == ["b", "a"]
    assert list(loaded["b"]) == ["z", "a"]


def test_set_overwrites(sqlite_store):
    sqlite_store.set("k", {"one": 1})
    sqlite_store.set("k", {"two": 2})
    assert sqlite_store.get("k") == {"two": 2}


def test_corrupt_row_returns_default(sqlite_store, db_path):
    conn = sqlite3.connect(db_path)
    conn.execute(
        "INSERT INTO options (option_key, option_value, updated_at) VALUES (?, ?, ?)",
        ("broken", "{not json", "2026-01-01T00:00:00"),
    )
    conn.commit()
    conn.close()

    assert sqlite_store.get("broken", {}) == {}


def test_import_and_read_back_through_sqlite(sqlite_store):
    rules = PaletteRules()
    result = run_import(
        ImportPalettesInput(json_input='{"Brand Colors": {"primary": "1a2b3c", "bad": "xyz"}}'),
        store=sqlite_store,
        rules=rules,
    )
    assert result.success is True

    fetched = run_get(GetPalettesInput(), store=sqlite_store, rules=rules)
    assert fetched.palettes == {"brandcolors": {"primary": "#1A2B3C"}}
