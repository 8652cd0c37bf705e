"""Filesystem helpers for config files and run reports."""

from __future__ import annotations

import json
from pathlib import Path


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def read_yaml(path: Path):
    """Load a scraper config file; an empty file yields ``None``."""
    import yaml

    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def write_json(path: Path, payload) -> None:
    """Write a run report, creating ``out/reports`` and similar parents as needed.

    Keys are sorted so summaries from repeated runs diff cleanly.
    """
    ensure_dir(path.parent)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2, sort_keys=True)
        f.write("\n")
