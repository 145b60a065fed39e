from datetime import datetime, timedelta, timezone

import pytest

from enex2mf.errors import EnexError, TimestampError
from enex2mf.parsers.timestamps import parse_enex_timestamp


# ---------------------------------------------------------------------------
# 1. Accepted forms
# ---------------------------------------------------------------------------
def test_utc_suffix():
    parsed = parse_enex_timestamp("20181226T083916Z")
    assert parsed == datetime(2018, 12, 26, 8, 39, 16, tzinfo=timezone.utc)


def test_result_is_in_local_zone():
    parsed = parse_enex_timestamp("20181226T083916Z")
    expected_local = datetime(2018, 12, 26, 8, 39, 16, tzinfo=timezone.utc).astimezone()

    assert parsed.utcoffset() == expected_local.utcoffset()
    assert parsed.replace(tzinfo=None) == expected_local.replace(tzinfo=None)


@pytest.mark.parametrize(
    "text, offset",
    [
        ("20181226T083916+0100", timedelta(hours=1)),
        ("20181226T083916+01:00", timedelta(hours=1)),
        ("20181226T083916+01", timedelta(hours=1)),
        ("20181226T083916-0530", -timedelta(hours=5, minutes=30)),
    ],
)
def test_numeric_offsets(text, offset):
    parsed = parse_enex_timestamp(text)
    assert parsed == datetime(2018, 12, 26, 8, 39, 16, tzinfo=timezone(offset))


def test_missing_zone_is_utc():
    parsed = parse_enex_timestamp("20181226T083916")
    assert parsed == datetime(2018, 12, 26, 8, 39, 16, tzinfo=timezone.utc)


def test_surrounding_whitespace_is_ignored():
    assert parse_enex_timestamp("  20181226T083916Z\n") == parse_enex_timestamp("20181226T083916Z")


# ---------------------------------------------------------------------------
# 2. Rejected forms
# ---------------------------------------------------------------------------
@pytest.mark.parametrize(
    "text",
    [
        None,
        "",
        "not-a-date",
        "2018-12-26T08:39:16Z",
        "20181226T0839Z",
        "20181326T083916Z",
        "20181226T083916+2500",
        "20181226T083916+0160",
        "20181226T083916+01:99",
        "20181226T083916Zjunk",
    ],
)
def test_invalid_timestamps_raise(text):
    with pytest.raises(TimestampError) as excinfo:
        parse_enex_timestamp(text)

    # Callers can catch it either way
    assert isinstance(excinfo.value, EnexError)
    assert isinstance(excinfo.value, ValueError)
