"""SQLite store bootstrap."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from dascraper.common.errors import StorageError
from dascraper.common.fs import ensure_dir

TABLE_NAME = "data"
STORED_COLUMNS = (
    "council_reference",
    "address",
    "description",
    "info_url",
    "comment_url",
    "date_scraped",
    "date_received",
    "on_notice_from",
    "on_notice_to",
)

CREATE_TABLE_SQL = f"""
CREATE TABLE IF NOT EXISTS [{TABLE_NAME}] (
    [council_reference] TEXT PRIMARY KEY,
    [address] TEXT,
    [description] TEXT,
    [info_url] TEXT,
    [comment_url] TEXT,
    [date_scraped] TEXT,
    [date_received] TEXT,
    [on_notice_from] TEXT,
    [on_notice_to] TEXT
)
"""


def ensure_schema(conn: sqlite3.Connection) -> None:
    try:
        with conn:
            conn.execute(CREATE_TABLE_SQL)
    except sqlite3.Error as exc:
        raise StorageError(f"Could not create table {TABLE_NAME}: {exc}") from exc


def open_database(path: Path | str) -> sqlite3.Connection:
    """Open (creating if needed) the store at ``path`` and ensure its table exists."""
    if str(path) != ":memory:":
        ensure_dir(Path(path).parent)
    try:
        conn = sqlite3.connect(str(path))
    except sqlite3.Error as exc:
        raise StorageError(f"Could not open database {path}: {exc}") from exc
    ensure_schema(conn)
    return conn
