"""Run report aggregation."""

from __future__ import annotations

from pathlib import Path

from dascraper.common.fs import write_json
from dascraper.pipeline.runner import ScrapeResult

COUNT_FIELDS = ("rows_in", "inserted", "skipped", "replaced", "dropped")


def write_run_summary(data_dir: Path, result: ScrapeResult, *, error_code: str | None = None) -> Path:
    totals = {name: 0 for name in COUNT_FIELDS}
    skipped_sources = 0
    for source in result.sources:
        for name in COUNT_FIELDS:
            totals[name] += getattr(source, name)
        if source.status in {"empty", "missing_columns"}:
            skipped_sources += 1

    payload = result.to_dict()
    payload["totals"] = totals
    payload["skipped_source_count"] = skipped_sources
    payload["error_code"] = error_code

    summary_path = data_dir / "out" / "reports" / "run_summary.json"
    write_json(summary_path, payload)
    return summary_path
