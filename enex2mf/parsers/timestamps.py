"""
Compact Evernote timestamps.

Exports stamp <created>/<updated> as `YYYYMMDDTHHMMSS` followed by a zone:

    20181226T083916Z
    20181226T083916+0100
    20181226T083916-05:00
    20181226T083916+09

A missing zone is read as UTC, which is what Evernote writes. Parsed
values are returned in the local zone.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from enex2mf.errors import TimestampError

TIMESTAMP_RE = re.compile(
    r"^(?P<stamp>\d{8}T\d{6})"
    r"(?:(?P<utc>[Zz])|(?P<sign>[+-])(?P<hours>\d{2})(?::?(?P<minutes>[0-5]\d))?)?$"
)


def parse_enex_timestamp(text: Optional[str]) -> datetime:
    """
    Parse a compact timestamp into a timezone-aware local datetime.

    Raises TimestampError for None, empty text, anything not matching the
    grammar and out-of-range calendar values.
    """
    if text is None:
        raise TimestampError(text)

    match = TIMESTAMP_RE.match(text.strip())
    if match is None:
        raise TimestampError(text)

    try:
        naive = datetime.strptime(match.group("stamp"), "%Y%m%dT%H%M%S")
    except ValueError as exc:
        raise TimestampError(text) from exc

    if match.group("sign"):
        offset = timedelta(
            hours=int(match.group("hours")),
            minutes=int(match.group("minutes") or 0),
        )
        if offset >= timedelta(hours=24):
            raise TimestampError(text)
        if match.group("sign") == "-":
            offset = -offset
        zone = timezone(offset)
    else:
        zone = timezone.utc

    return naive.replace(tzinfo=zone).astimezone()
