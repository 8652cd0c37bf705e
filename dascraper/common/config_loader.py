"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from dascraper.common.errors import ConfigError
from dascraper.common.fs import read_yaml
from dascraper.common.schema import validate_scraper_config

CONFIG_FILENAME = "scraper.yml"


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> dict:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    base = read_yaml(path)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = read_yaml(overlay_path)
    if overlay is None:
        return base
    return _deep_merge(base, overlay)


def load_config(
    config_dir: Path,
    *,
    allow_unknown: bool = False,
    overlay_config_dir: Path | None = None,
) -> dict:
    overlay_path = overlay_config_dir / CONFIG_FILENAME if overlay_config_dir is not None else None
    cfg = _load_yaml_with_overlay(config_dir / CONFIG_FILENAME, overlay_path)
    return validate_scraper_config(cfg, allow_unknown=allow_unknown)
