"""Locate the register fields in a CSV header row."""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from dascraper.common.constants import (
    ADDRESS_PART_1_HEADER,
    ADDRESS_PART_2_HEADER,
    APPLICATION_NUMBER_HEADER,
    DESCRIPTION_HEADER,
    RECEIVED_DATE_HEADER,
)
from dascraper.common.models import HeaderMapping

# Exact, case-sensitive header text to HeaderMapping slot.
HEADER_SLOTS = {
    APPLICATION_NUMBER_HEADER: "application_number",
    RECEIVED_DATE_HEADER: "received_date",
    DESCRIPTION_HEADER: "description",
    ADDRESS_PART_1_HEADER: "address_part_1",
    ADDRESS_PART_2_HEADER: "address_part_2",
}


def locate_columns(header_row: Sequence[str]) -> HeaderMapping:
    """Map recognised header names to their column positions.

    Cells are compared verbatim, so ``" ApplicationNumber"`` does not match.
    A name repeated in the header resolves to its last occurrence. Names that
    are not present keep the absent marker; this function never raises.
    """
    positions: dict[str, int] = {}
    for index, cell in enumerate(header_row):
        slot = HEADER_SLOTS.get(cell)
        if slot is not None:
            positions[slot] = index
    return replace(HeaderMapping(), **positions)
