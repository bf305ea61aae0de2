"""Preferences for the Yahtzee frontends.

Read from ~/.yahtzee_settings.json when present. Settings are never written
back; only display preferences live here, never game state.
"""

import json
from pathlib import Path

DEFAULTS = {
    "show_categories": False,
    "dice_style": "plain",
}

DICE_STYLES = ("plain", "box")


def _default_path():
    """Return the default path for the settings file."""
    return Path.home() / ".yahtzee_settings.json"


def load_settings(path=None):
    """Load settings from JSON file. Returns DEFAULTS on missing/corrupt.

    Merges with DEFAULTS so missing keys get default values.
    Unknown keys and values of the wrong type are ignored.
    """
    if path is None:
        path = _default_path()
    path = Path(path)
    try:
        data = json.loads(path.read_text())
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return dict(DEFAULTS)
    if not isinstance(data, dict):
        return dict(DEFAULTS)

    result = dict(DEFAULTS)
    if isinstance(data.get("show_categories"), bool):
        result["show_categories"] = data["show_categories"]
    if data.get("dice_style") in DICE_STYLES:
        result["dice_style"] = data["dice_style"]
    return result
