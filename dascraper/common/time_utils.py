"""UTC-focused helpers for run identifiers and scrape dates."""

from __future__ import annotations

from datetime import date, datetime, timezone


def utc_today_iso() -> str:
    return datetime.now(tz=timezone.utc).date().isoformat()


def parse_run_date(value: str | None) -> str:
    """Return the scrape date as YYYY-MM-DD, defaulting to today (UTC)."""
    if not value:
        return utc_today_iso()
    return date.fromisoformat(value).isoformat()


def utc_timestamp_iso() -> str:
    return datetime.now(tz=timezone.utc).isoformat(timespec="milliseconds")


def generate_run_id() -> str:
    now = datetime.now(tz=timezone.utc)
    return now.strftime("scrape-%Y%m%dT%H%M%S%fZ")
