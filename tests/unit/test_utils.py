from datetime import datetime, timezone

from tracker.utils.dates import ZERO_TIME, parse_date
from tracker.utils.locations import normalize_place, parse_location


def test_parse_date_layouts():
    assert parse_date("2024-01-05") == (datetime(2024, 1, 5, tzinfo=timezone.utc), True)
    assert parse_date("2024-01-05T20:30:00Z").value == datetime(2024, 1, 5, 20, 30, tzinfo=timezone.utc)
    assert parse_date("05/01/2024").value == datetime(2024, 1, 5, tzinfo=timezone.utc)
    assert parse_date("05 Jan 2024").value == datetime(2024, 1, 5, tzinfo=timezone.utc)
    assert parse_date("January 5, 2024").value == datetime(2024, 1, 5, tzinfo=timezone.utc)


def test_parse_date_rfc3339_offset_is_an_instant():
    early = parse_date("2024-01-05T20:00:00+02:00")
    late = parse_date("2024-01-05T19:00:00Z")
    assert early.ok and late.ok
    assert early.value < late.value


def test_parse_date_rfc3339_fractional_seconds():
    parsed = parse_date("2024-01-05T20:00:00.250Z")
    assert parsed.ok is True
    assert parsed.value.microsecond == 250000


def test_parse_date_failure_returns_zero_time():
    for text in ["soon", "", "*23-08-2019", "2024-13-40"]:
        parsed = parse_date(text)
        assert parsed.ok is False
        assert parsed.value == ZERO_TIME


def test_parse_location_examples():
    assert parse_location("paris-france") == ("Paris", "France")
    assert parse_location("new_york-usa") == ("New York", "Usa")
    assert parse_location("unknown") == ("Unknown", "")
    assert parse_location("") == ("", "")


def test_parse_location_splits_on_last_hyphen():
    assert parse_location("saint-denis-france") == ("Saint-Denis", "France")
    assert parse_location("LOS_ANGELES-USA") == ("Los Angeles", "Usa")
    assert parse_location("north_carolina-usa") == ("North Carolina", "Usa")


def test_normalize_place_collapses_spaces():
    assert normalize_place("rio__de_janeiro") == "Rio De Janeiro"
    assert normalize_place("  seoul ") == "Seoul"


def test_parse_date_rejects_unpadded_fields():
    for text in ["2024-1-5", "5/1/2024", "5 Jan 2024", "2024-01-05T20:00:00", "05 January 2024"]:
        assert parse_date(text).ok is False


def test_parse_date_rfc3339_nanoseconds():
    parsed = parse_date("2024-01-05T20:00:00.123456789Z")
    assert parsed.ok is True
    assert parsed.value == datetime(2024, 1, 5, 20, 0, 0, 123456, tzinfo=timezone.utc)
