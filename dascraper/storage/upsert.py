"""Idempotent persistence of development application records."""

from __future__ import annotations

import enum
import sqlite3

from dascraper.common.constants import UPSERT_INSERT_IF_ABSENT, UPSERT_POLICIES, UPSERT_REPLACE
from dascraper.common.errors import ConfigError, StorageError
from dascraper.common.models import DevelopmentApplicationRecord
from dascraper.storage.database import STORED_COLUMNS, TABLE_NAME

_PLACEHOLDERS = ", ".join("?" for _ in STORED_COLUMNS)
_INSERT_IF_ABSENT_SQL = f"INSERT OR IGNORE INTO [{TABLE_NAME}] VALUES ({_PLACEHOLDERS})"
_REPLACE_SQL = f"INSERT OR REPLACE INTO [{TABLE_NAME}] VALUES ({_PLACEHOLDERS})"
_EXISTS_SQL = f"SELECT 1 FROM [{TABLE_NAME}] WHERE council_reference = ?"


class UpsertOutcome(str, enum.Enum):
    INSERTED = "inserted"
    SKIPPED = "skipped"
    REPLACED = "replaced"

    @property
    def created(self) -> bool:
        return self is UpsertOutcome.INSERTED


def _row_values(record: DevelopmentApplicationRecord) -> tuple:
    # on_notice_from and on_notice_to are never populated by the scraper.
    return (
        record.application_number,
        record.address,
        record.description,
        record.information_url,
        record.comment_url,
        record.scrape_date,
        record.received_date,
        None,
        None,
    )


class UpsertGateway:
    """Write records keyed by application number under one conflict policy.

    ``insert_if_absent`` leaves an existing row untouched, so the first
    description stored for an application wins. ``replace`` overwrites the
    whole row, clearing the on-notice columns.
    """

    def __init__(self, conn: sqlite3.Connection, policy: str = UPSERT_INSERT_IF_ABSENT) -> None:
        if policy not in UPSERT_POLICIES:
            raise ConfigError(f"Unknown upsert policy: {policy}")
        self.conn = conn
        self.policy = policy

    def upsert(self, record: DevelopmentApplicationRecord) -> UpsertOutcome:
        try:
            with self.conn:
                if self.policy == UPSERT_REPLACE:
                    return self._replace(record)
                return self._insert_if_absent(record)
        except sqlite3.Error as exc:
            raise StorageError(f"Could not store application {record.application_number}: {exc}") from exc

    def _insert_if_absent(self, record: DevelopmentApplicationRecord) -> UpsertOutcome:
        cursor = self.conn.execute(_INSERT_IF_ABSENT_SQL, _row_values(record))
        return UpsertOutcome.INSERTED if cursor.rowcount > 0 else UpsertOutcome.SKIPPED

    def _replace(self, record: DevelopmentApplicationRecord) -> UpsertOutcome:
        existed = self.conn.execute(_EXISTS_SQL, (record.application_number,)).fetchone() is not None
        self.conn.execute(_REPLACE_SQL, _row_values(record))
        return UpsertOutcome.REPLACED if existed else UpsertOutcome.INSERTED
