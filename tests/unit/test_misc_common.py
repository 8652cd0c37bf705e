import json
import logging
import sys
from pathlib import Path

import pytest

from dascraper.common.constants import JSON_LOG_FIELDS
from dascraper.common.logging import JsonLineFormatter, build_logger, close_logger, log_event
from dascraper.common.time_utils import generate_run_id, parse_run_date


def test_generate_run_id_prefix():
    assert generate_run_id().startswith("scrape-")


def test_parse_run_date_defaults_and_iso():
    assert parse_run_date("2026-10-18") == "2026-10-18"
    assert len(parse_run_date(None)) == len("2026-10-18")
    with pytest.raises(ValueError):
        parse_run_date("18/10/2026")


def test_json_formatter_emits_stable_fields():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.event = "ROW_INSERTED"
    record.application_number = "DA1"

    payload = json.loads(JsonLineFormatter().format(record))

    assert set(payload) == set(JSON_LOG_FIELDS)
    assert payload["message"] == "hello world"
    assert payload["event"] == "ROW_INSERTED"
    assert payload["application_number"] == "DA1"
    assert payload["rows_in"] is None


def test_json_formatter_marks_errors():
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", (), None)
    assert json.loads(JsonLineFormatter().format(record))["status"] == "error"


def test_build_logger_writes_jsonl_file(tmp_path: Path):
    logger = build_logger("run-test", data_dir=tmp_path)
    log_event(logger, "scrape start", run_id="run-test", event="RUN_START", status="ok")
    close_logger(logger)

    lines = (tmp_path / "run_meta" / "run-test.log.jsonl").read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[0])["event"] == "RUN_START"


def test_json_formatter_includes_traceback_for_exceptions():
    try:
        raise RuntimeError("disk full")
    except RuntimeError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "unexpected failure", (), sys.exc_info())

    payload = json.loads(JsonLineFormatter().format(record))

    assert "RuntimeError: disk full" in payload["exc_info"]
    assert payload["status"] == "error"
