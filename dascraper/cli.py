"""CLI entrypoint for the development application register scraper."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dascraper.common.config_loader import load_config
from dascraper.common.constants import EXIT_HARD_FAIL, EXIT_SUCCESS
from dascraper.common.errors import PipelineError
from dascraper.common.http import HttpClient, TimeoutConfig
from dascraper.common.logging import build_logger, close_logger, log_event
from dascraper.common.time_utils import generate_run_id, parse_run_date
from dascraper.discovery.selection import build_source_selector
from dascraper.pipeline.reports import write_run_summary
from dascraper.pipeline.runner import ScrapeResult, run_scrape
from dascraper.storage.database import open_database
from dascraper.storage.upsert import UpsertGateway


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config-dir", default="./config")
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--data-dir", default="./data")
    parser.add_argument("--database", default=None, help="Overrides storage.database_path.")
    parser.add_argument("--run-date", default=None)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random source selection.")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def run_command(args: argparse.Namespace) -> int:
    run_id = args.run_id or generate_run_id()
    scrape_date = parse_run_date(args.run_date)
    data_dir = Path(args.data_dir)
    overlay_config_dir = Path(args.overlay_config_dir) if args.overlay_config_dir else None

    logger = build_logger(run_id, data_dir=data_dir, level=args.log_level)
    result = ScrapeResult(run_id=run_id, scrape_date=scrape_date)
    error_code = None
    try:
        config = load_config(Path(args.config_dir), overlay_config_dir=overlay_config_dir)
        database_path = args.database or config["storage"]["database_path"]
        selector = build_source_selector(config["catalog"]["max_sources"], seed=args.seed)
        timeout = TimeoutConfig(**config["http"]["timeout"])

        log_event(logger, "scrape start", run_id=run_id, stage="run", event="RUN_START", status="ok")
        conn = open_database(database_path)
        try:
            with HttpClient(timeout=timeout) as client:
                run_scrape(
                    config,
                    client,
                    UpsertGateway(conn, config["storage"]["upsert_policy"]),
                    selector=selector,
                    scrape_date=scrape_date,
                    logger=logger,
                    run_id=run_id,
                    result=result,
                )
        finally:
            conn.close()
    except PipelineError as exc:
        error_code = exc.error_code
        log_event(
            logger,
            f"scrape failed: {exc}",
            level=logging.ERROR,
            run_id=run_id,
            stage="run",
            event="RUN_FAIL",
            status="error",
            error_code=error_code,
        )
    except Exception:
        error_code = "UNEXPECTED_ERROR"
        logger.exception(
            "unexpected failure",
            extra={"run_id": run_id, "stage": "run", "event": "RUN_FAIL", "status": "error", "error_code": error_code},
        )

    if error_code is not None:
        result.status = "error"
    write_run_summary(data_dir, result, error_code=error_code)
    log_event(logger, "Complete." if error_code is None else "Aborted.", run_id=run_id, stage="run", event="RUN_END", status=result.status)
    close_logger(logger)
    return EXIT_SUCCESS if error_code is None else EXIT_HARD_FAIL


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    return run_command(args)


if __name__ == "__main__":
    raise SystemExit(main())
