import pytest

from dascraper.common.errors import CsvFormatError
from dascraper.harvest.csv_source import fetch_csv_rows, parse_csv


def test_parse_csv_handles_quoted_cells():
    text = 'ApplicationNumber,ApplicationDesc\r\nDA1,"Shed, carport and ""granny flat"""\r\n'
    assert parse_csv(text) == [
        ["ApplicationNumber", "ApplicationDesc"],
        ["DA1", 'Shed, carport and "granny flat"'],
    ]


def test_parse_csv_strips_byte_order_mark():
    rows = parse_csv("\ufeffApplicationNumber,PropertyAddress\nDA1,1 Smith St\n")
    assert rows[0][0] == "ApplicationNumber"


def test_parse_csv_skips_blank_lines_and_empty_body():
    assert parse_csv("a,b\n\n1,2\n") == [["a", "b"], ["1", "2"]]
    assert parse_csv("") == []


def test_parse_csv_rejects_malformed_quoting():
    with pytest.raises(CsvFormatError):
        parse_csv('a,b\n"unterminated,1\n')


def test_fetch_csv_rows_parses_downloaded_body():
    class FakeClient:
        def get_text(self, url):
            return "ApplicationNumber\nDA1\n"

    assert fetch_csv_rows(FakeClient(), "https://example.test/a.csv") == [["ApplicationNumber"], ["DA1"]]
