"""Data models shared by the extraction pipeline and the store."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Sequence

from dascraper.common.constants import ABSENT_INDEX, NO_DESCRIPTION


@dataclass(frozen=True)
class HeaderMapping:
    """Column positions of the fields the pipeline reads from one CSV.

    Each slot holds a zero-based column index, or ``ABSENT_INDEX`` when the
    header row has no column of that name.
    """

    application_number: int = ABSENT_INDEX
    received_date: int = ABSENT_INDEX
    description: int = ABSENT_INDEX
    address_part_1: int = ABSENT_INDEX
    address_part_2: int = ABSENT_INDEX

    @property
    def has_mandatory_columns(self) -> bool:
        if self.application_number == ABSENT_INDEX:
            return False
        return self.address_part_1 != ABSENT_INDEX or self.address_part_2 != ABSENT_INDEX

    def missing_columns(self) -> list[str]:
        return [name for name, index in asdict(self).items() if index == ABSENT_INDEX]

    def cell(self, row: Sequence[str], slot: str) -> str | None:
        """Return the raw cell for ``slot``, ``None`` if the column is absent."""
        index = getattr(self, slot)
        if index == ABSENT_INDEX:
            return None
        if index >= len(row):
            return ""
        return row[index]


@dataclass(frozen=True)
class DevelopmentApplicationRecord:
    application_number: str
    address: str
    description: str
    information_url: str
    comment_url: str
    scrape_date: str
    received_date: str = ""

    def __post_init__(self) -> None:
        if not self.application_number.strip():
            raise ValueError("application_number must be non-empty")
        if not self.address.strip():
            raise ValueError("address must be non-empty")
        if not self.description.strip():
            object.__setattr__(self, "description", NO_DESCRIPTION)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
