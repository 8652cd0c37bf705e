"""Strict schema for the scraper YAML config."""

from __future__ import annotations

from dascraper.common.constants import UPSERT_POLICIES
from dascraper.common.errors import ConfigError

SECTION_KEYS = {
    "catalog": {"url", "link_selector", "max_sources"},
    "authority": {"comment_url"},
    "storage": {"database_path", "upsert_policy"},
    "address": {"separator"},
    "http": {"timeout"},
}


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def validate_scraper_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    _assert_required_keys(cfg, set(SECTION_KEYS), "scraper config")
    _assert_no_unknown_keys(cfg, set(SECTION_KEYS), "scraper config", allow_unknown)
    for section, keys in SECTION_KEYS.items():
        _assert_required_keys(cfg[section], keys, section)
        _assert_no_unknown_keys(cfg[section], keys, section, allow_unknown)
    _assert_required_keys(cfg["http"]["timeout"], {"connect", "read"}, "http.timeout")
    _assert_no_unknown_keys(cfg["http"]["timeout"], {"connect", "read"}, "http.timeout", allow_unknown=False)

    max_sources = cfg["catalog"]["max_sources"]
    if not isinstance(max_sources, int) or isinstance(max_sources, bool) or max_sources < 1:
        raise ConfigError("catalog.max_sources must be a positive integer")

    policy = cfg["storage"]["upsert_policy"]
    if policy not in UPSERT_POLICIES:
        raise ConfigError(f"storage.upsert_policy must be one of: {', '.join(UPSERT_POLICIES)}")

    if not isinstance(cfg["address"]["separator"], str):
        raise ConfigError("address.separator must be a string")

    return cfg
