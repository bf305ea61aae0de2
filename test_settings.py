"""
Settings Test Suite

Tests for loading display preferences.

Sections:
    1. Load — missing file, corrupt file, partial, unknown keys, bad values
"""
import json

from settings import DEFAULTS, load_settings

# ── 1. Load ──────────────────────────────────────────────────────────────────


def test_load_missing_file_returns_defaults(tmp_path):
    """Loading from a nonexistent file returns DEFAULTS."""
    path = tmp_path / "no_such_file.json"
    assert load_settings(path=path) == DEFAULTS


def test_load_corrupt_file_returns_defaults(tmp_path):
    """Loading from a corrupt (non-JSON) file returns DEFAULTS."""
    path = tmp_path / "bad.json"
    path.write_text("not json at all {{{")
    assert load_settings(path=path) == DEFAULTS


def test_load_non_object_returns_defaults(tmp_path):
    path = tmp_path / "list.json"
    path.write_text(json.dumps([1, 2, 3]))
    assert load_settings(path=path) == DEFAULTS


def test_load_full_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"show_categories": True, "dice_style": "box"}))
    assert load_settings(path=path) == {"show_categories": True, "dice_style": "box"}


def test_partial_file_fills_missing_keys(tmp_path):
    """A file with only some keys gets missing ones filled from DEFAULTS."""
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"show_categories": True}))
    result = load_settings(path=path)
    assert result["show_categories"] is True
    assert result["dice_style"] == DEFAULTS["dice_style"]


def test_unknown_keys_ignored(tmp_path):
    """Unknown keys in the file are dropped, not passed through."""
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"show_categories": True, "unknown_key": 42}))
    result = load_settings(path=path)
    assert "unknown_key" not in result
    assert result["show_categories"] is True


def test_bad_values_fall_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"show_categories": "yes", "dice_style": "fancy"}))
    assert load_settings(path=path) == DEFAULTS


def test_defaults_are_not_shared(tmp_path):
    """Mutating a loaded dict never changes DEFAULTS."""
    result = load_settings(path=tmp_path / "missing.json")
    result["dice_style"] = "box"
    assert DEFAULTS["dice_style"] == "plain"
