"""Download and tokenise register CSVs."""

from __future__ import annotations

import csv
import io

from dascraper.common.errors import CsvFormatError
from dascraper.common.http import HttpClient

_BOM = "\ufeff"


def parse_csv(text: str) -> list[list[str]]:
    """Split CSV text into rows of string cells.

    A leading byte order mark is removed so the first header name compares
    cleanly. Blank lines yield no row.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM):]
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    try:
        return [row for row in reader if row]
    except csv.Error as exc:
        raise CsvFormatError(f"Malformed CSV at line {reader.line_num}: {exc}") from exc


def fetch_csv_rows(client: HttpClient, url: str) -> list[list[str]]:
    return parse_csv(client.get_text(url))
