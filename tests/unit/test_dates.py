import pytest

from dascraper.pipeline.dates import normalize_date


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("5/03/2018 12:00:00 AM", "2018-03-05"),
        ("05/03/2018 12:00:00 AM", "2018-03-05"),
        ("1/02/2020 9:00:00 AM", "2020-02-01"),
        ("31/12/2019 11:59:59 PM", "2019-12-31"),
        ("29/02/2020 1:30:00 pm", "2020-02-29"),
    ],
)
def test_normalize_date_accepts_register_format(raw, expected):
    assert normalize_date(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "2018-03-05",
        "5/3/2018 12:00:00 AM",
        "5/03/18 12:00:00 AM",
        "5/03/2018",
        "5/03/2018 12:00 AM",
        "5-03-2018 12:00:00 AM",
        "5/13/2018 12:00:00 AM",
        "31/02/2018 12:00:00 AM",
        "29/02/2019 12:00:00 AM",
        "5/03/2018 12:00:00",
        "5/03/2018 12:00:00 AM extra",
        "5/03/2018 25:00:00 AM",
        "ab/03/2018 12:00:00 AM",
        "5/03/2018 12:00:00 AM\n",
        "\u0665/03/2018 12:00:00 AM",
        "5/\u0660\u0663/2018 12:00:00 AM",
    ],
)
def test_normalize_date_rejects_anything_else(raw):
    assert normalize_date(raw) == ""


def test_normalize_date_empty_and_missing():
    assert normalize_date("") == ""
    assert normalize_date(None) == ""
