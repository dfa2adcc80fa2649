"""Load and provide typed access to config.yaml."""

from pathlib import Path

import yaml

DEFAULTS = {
    "output": {
        "date_format": "%Y-%m-%d",
        "show_weekday": True,
    },
    "features": {
        "columns": ["is_weekend", "is_holiday"],
    },
}


def load_config(path: Path | None = None) -> dict:
    """Load config.yaml and return as dict with defaults merged."""
    if path is None:
        path = python_root() / "config.yaml"
    with open(path) as f:
        cfg = yaml.safe_load(f) or {}

    # Merge each section over its defaults; unknown sections pass through
    for section, defaults in DEFAULTS.items():
        cfg[section] = {**defaults, **(cfg.get(section) or {})}

    return cfg


def python_root() -> Path:
    """Return the norholidays package directory."""
    return Path(__file__).parent.parent
