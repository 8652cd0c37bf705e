import dataclasses

import pytest

from dascraper.common.constants import ABSENT_INDEX, NO_DESCRIPTION
from dascraper.common.models import DevelopmentApplicationRecord, HeaderMapping


def _record(**overrides):
    values = {
        "application_number": "DA1",
        "address": "1 Smith St",
        "description": "Shed",
        "information_url": "https://example.test/a.csv",
        "comment_url": "mailto:x@example.test",
        "scrape_date": "2026-10-18",
    }
    values.update(overrides)
    return DevelopmentApplicationRecord(**values)


def test_record_requires_application_number_and_address():
    with pytest.raises(ValueError):
        _record(application_number="  ")
    with pytest.raises(ValueError):
        _record(address="")


def test_record_defaults_description_and_received_date():
    record = _record(description="")
    assert record.description == NO_DESCRIPTION
    assert record.received_date == ""
    assert record.to_dict()["application_number"] == "DA1"


def test_header_mapping_is_immutable():
    mapping = HeaderMapping(application_number=0, address_part_1=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        mapping.application_number = 3


def test_header_mapping_cell_lookup():
    mapping = HeaderMapping(application_number=0, description=3)
    row = ["DA1", "x"]
    assert mapping.cell(row, "application_number") == "DA1"
    assert mapping.cell(row, "description") == ""
    assert mapping.cell(row, "received_date") is None
    assert mapping.address_part_2 == ABSENT_INDEX
