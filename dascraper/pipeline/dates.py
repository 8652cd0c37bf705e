"""Lodgement date normalisation."""

from __future__ import annotations

import re
from datetime import date

# D/MM/YYYY h:mm:ss AM, with the leading zero of the day and hour optional.
LODGEMENT_DATE_RE = re.compile(
    r"(?P<day>[0-9]{1,2})/(?P<month>[0-9]{2})/(?P<year>[0-9]{4}) "
    r"(?P<hour>[0-9]{1,2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2}) (?P<meridiem>[AaPp][Mm])"
)


def normalize_date(raw: str | None) -> str:
    """Return ``raw`` as ``YYYY-MM-DD``, or ``""`` when it does not parse.

    >>> normalize_date("5/03/2018 12:00:00 AM")
    '2018-03-05'
    >>> normalize_date("2018-03-05")
    ''
    """
    if not raw:
        return ""
    match = LODGEMENT_DATE_RE.fullmatch(raw)
    if match is None:
        return ""

    hour = int(match["hour"])
    if hour > 23 or int(match["minute"]) > 59 or int(match["second"]) > 59:
        return ""

    try:
        parsed = date(int(match["year"]), int(match["month"]), int(match["day"]))
    except ValueError:
        return ""
    return parsed.isoformat()
