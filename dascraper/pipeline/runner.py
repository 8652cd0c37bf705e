"""Sequential scrape driver: discover, select, extract, store."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Sequence

from dascraper.common.errors import PipelineError
from dascraper.common.http import HttpClient
from dascraper.common.logging import log_event
from dascraper.discovery.catalog_discover import discover_csv_urls
from dascraper.discovery.selection import SourceSelector
from dascraper.harvest.csv_source import fetch_csv_rows
from dascraper.pipeline.columns import locate_columns
from dascraper.pipeline.extract import extract_record
from dascraper.storage.upsert import UpsertGateway, UpsertOutcome

_OUTCOME_MESSAGES = {
    UpsertOutcome.INSERTED: "Inserted: application \"{number}\" with address \"{address}\" and description \"{description}\" into the database.",
    UpsertOutcome.SKIPPED: "Skipped: application \"{number}\" with address \"{address}\" and description \"{description}\" because it was already present in the database.",
    UpsertOutcome.REPLACED: "Replaced: application \"{number}\" with address \"{address}\" and description \"{description}\" in the database.",
}


@dataclass
class SourceStats:
    url: str
    status: str = "pending"
    rows_in: int = 0
    inserted: int = 0
    skipped: int = 0
    replaced: int = 0
    dropped: int = 0
    missing_columns: list[str] = field(default_factory=list)

    def count(self, outcome: UpsertOutcome) -> None:
        if outcome is UpsertOutcome.INSERTED:
            self.inserted += 1
        elif outcome is UpsertOutcome.SKIPPED:
            self.skipped += 1
        else:
            self.replaced += 1

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ScrapeResult:
    run_id: str
    scrape_date: str
    catalog_url: str = ""
    status: str = "running"
    discovered: list[str] = field(default_factory=list)
    selected: list[str] = field(default_factory=list)
    sources: list[SourceStats] = field(default_factory=list)

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["sources"] = [source.to_dict() for source in self.sources]
        return payload


def process_source(
    url: str,
    rows: Sequence[Sequence[str]],
    *,
    gateway: UpsertGateway,
    scrape_date: str,
    comment_url: str,
    address_separator: str,
    logger: logging.Logger,
    run_id: str,
    stats: SourceStats | None = None,
) -> SourceStats:
    """Store every complete application found in one tokenised CSV.

    The header row is mapped once. A CSV without an application number column,
    or without both address columns, is skipped. Storage errors propagate.
    """
    stats = stats or SourceStats(url=url)
    if not rows:
        stats.status = "empty"
        log_event(logger, f"No rows found in {url}.", run_id=run_id, stage="extract", source=url, event="SOURCE_EMPTY", status="skipped")
        return stats

    mapping = locate_columns(rows[0])
    if not mapping.has_mandatory_columns:
        stats.status = "missing_columns"
        stats.missing_columns = mapping.missing_columns()
        log_event(
            logger,
            f"Could not parse any development applications from {url}.",
            run_id=run_id,
            stage="extract",
            source=url,
            event="SOURCE_SKIPPED",
            status="skipped",
        )
        return stats

    for row in rows[1:]:
        stats.rows_in += 1
        record = extract_record(
            mapping,
            row,
            url,
            scrape_date,
            comment_url=comment_url,
            address_separator=address_separator,
        )
        if record is None:
            stats.dropped += 1
            continue

        outcome = gateway.upsert(record)
        stats.count(outcome)
        log_event(
            logger,
            _OUTCOME_MESSAGES[outcome].format(
                number=record.application_number,
                address=record.address,
                description=record.description,
            ),
            run_id=run_id,
            stage="store",
            source=url,
            event=f"ROW_{outcome.name}",
            status="ok",
            application_number=record.application_number,
        )

    stats.status = "processed"
    log_event(
        logger,
        f"Finished {url}.",
        run_id=run_id,
        stage="extract",
        source=url,
        event="SOURCE_DONE",
        status="ok",
        rows_in=stats.rows_in,
        rows_out=stats.inserted + stats.skipped + stats.replaced,
    )
    return stats


def run_scrape(
    config: dict,
    client: HttpClient,
    gateway: UpsertGateway,
    *,
    selector: SourceSelector,
    scrape_date: str,
    logger: logging.Logger,
    run_id: str,
    result: ScrapeResult | None = None,
) -> ScrapeResult:
    """Run one scrape. ``result`` is filled in as the run progresses."""
    result = result or ScrapeResult(run_id=run_id, scrape_date=scrape_date)
    catalog_url = config["catalog"]["url"]
    result.catalog_url = catalog_url

    log_event(logger, f"Retrieving page: {catalog_url}", run_id=run_id, stage="discover", source=catalog_url, event="CATALOG_FETCH", status="ok")
    result.discovered = discover_csv_urls(client, catalog_url, config["catalog"]["link_selector"])
    if not result.discovered:
        result.status = "no_sources"
        log_event(
            logger,
            f"No CSV files to parse were found on the page: {catalog_url}",
            run_id=run_id,
            stage="discover",
            source=catalog_url,
            event="NO_SOURCES",
            status="ok",
        )
        return result

    result.selected = selector(result.discovered)
    for url in result.selected:
        stats = SourceStats(url=url)
        result.sources.append(stats)
        log_event(logger, f"Retrieving: {url}", run_id=run_id, stage="harvest", source=url, event="SOURCE_FETCH", status="ok")
        try:
            rows = fetch_csv_rows(client, url)
            process_source(
                url,
                rows,
                gateway=gateway,
                scrape_date=scrape_date,
                comment_url=config["authority"]["comment_url"],
                address_separator=config["address"]["separator"],
                logger=logger,
                run_id=run_id,
                stats=stats,
            )
        except PipelineError:
            stats.status = "failed"
            raise

    result.status = "success"
    return result
