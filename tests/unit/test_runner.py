import logging

import pytest

from dascraper.common.errors import StorageError
from dascraper.pipeline.runner import process_source
from dascraper.storage.database import open_database
from dascraper.storage.upsert import UpsertGateway

URL = "https://example.test/da-2020.csv"
HEADER = ["ApplicationNumber", "PropertyAddress", "PropertySuburbPostCode", "ApplicationDesc", "LodgementDate"]


def _process(rows, gateway):
    return process_source(
        URL,
        rows,
        gateway=gateway,
        scrape_date="2026-10-18",
        comment_url="mailto:x@example.test",
        address_separator=" ",
        logger=logging.getLogger("dascraper.test"),
        run_id="run-test",
    )


def test_process_source_counts_outcomes():
    conn = open_database(":memory:")
    rows = [
        HEADER,
        ["DA1", "1 Smith St", "Adelaide 5000", "Shed", "1/02/2020 9:00:00 AM"],
        ["DA2", "", "", "No address", ""],
        ["DA1", "1 Smith St", "Adelaide 5000", "Changed", ""],
        ["DA3", "", "Elizabeth 5112", "", "bad date"],
    ]

    stats = _process(rows, UpsertGateway(conn))

    assert stats.status == "processed"
    assert (stats.rows_in, stats.inserted, stats.skipped, stats.dropped) == (4, 2, 1, 1)
    assert conn.execute("SELECT description FROM data WHERE council_reference = 'DA1'").fetchone()[0] == "Shed"


def test_process_source_logs_outcome_with_record_details(caplog):
    conn = open_database(":memory:")
    with caplog.at_level(logging.INFO, logger="dascraper.test"):
        _process([HEADER, ["DA1", "1 Smith St", "", "Shed", ""]], UpsertGateway(conn))

    inserted = [r for r in caplog.records if getattr(r, "event", None) == "ROW_INSERTED"]
    assert len(inserted) == 1
    assert inserted[0].getMessage() == (
        'Inserted: application "DA1" with address "1 Smith St" and description "Shed" into the database.'
    )


def test_process_source_skips_csv_without_mandatory_columns():
    conn = open_database(":memory:")
    stats = _process([["ApplicationNumber", "ApplicationDesc"], ["DA1", "Shed"]], UpsertGateway(conn))

    assert stats.status == "missing_columns"
    assert "address_part_1" in stats.missing_columns
    assert stats.rows_in == 0
    assert conn.execute("SELECT COUNT(*) FROM data").fetchone()[0] == 0


def test_process_source_handles_empty_csv():
    conn = open_database(":memory:")
    assert _process([], UpsertGateway(conn)).status == "empty"


def test_process_source_propagates_storage_failure():
    conn = open_database(":memory:")
    conn.execute("DROP TABLE data")

    with pytest.raises(StorageError):
        _process([HEADER, ["DA1", "1 Smith St", "", "", ""]], UpsertGateway(conn))
