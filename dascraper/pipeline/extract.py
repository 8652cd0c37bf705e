"""Build canonical development application records from CSV rows."""

from __future__ import annotations

from typing import Sequence

from dascraper.common.constants import DEFAULT_COMMENT_URL, NO_DESCRIPTION
from dascraper.common.models import DevelopmentApplicationRecord, HeaderMapping
from dascraper.pipeline.address import combine_address
from dascraper.pipeline.dates import normalize_date


def _trimmed(mapping: HeaderMapping, row: Sequence[str], slot: str) -> str:
    value = mapping.cell(row, slot)
    return value.strip() if value is not None else ""


def extract_record(
    mapping: HeaderMapping,
    row: Sequence[str],
    source_url: str,
    scrape_date: str,
    *,
    comment_url: str = DEFAULT_COMMENT_URL,
    address_separator: str = " ",
) -> DevelopmentApplicationRecord | None:
    """Return the record held in ``row``, or ``None`` if it lacks a key or address."""
    application_number = _trimmed(mapping, row, "application_number")
    address_part_1 = _trimmed(mapping, row, "address_part_1")
    address_part_2 = _trimmed(mapping, row, "address_part_2")
    description = _trimmed(mapping, row, "description")

    raw_received = mapping.cell(row, "received_date")
    received_date = normalize_date(raw_received.strip() if raw_received is not None else None)

    address = combine_address(address_part_1, address_part_2, address_separator)
    if not application_number or not address:
        return None

    return DevelopmentApplicationRecord(
        application_number=application_number,
        address=address,
        description=description or NO_DESCRIPTION,
        information_url=source_url,
        comment_url=comment_url,
        scrape_date=scrape_date,
        received_date=received_date,
    )
