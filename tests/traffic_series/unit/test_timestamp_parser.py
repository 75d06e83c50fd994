import pytest
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo
from src.common.exceptions import ConfigurationError
from src.traffic_series.infrastructure.timestamp_parser import SQLiteTimestampParser

def test_sqlite_datetime_is_utc(parser):
    parsed = parser.parse("2025-08-20 20:18:00")
    assert parsed == datetime(2025, 8, 20, 20, 18, tzinfo=timezone.utc)
    assert parsed.tzinfo is not None

def test_sqlite_datetime_without_seconds(parser):
    assert parser.parse("2025-08-20 20:18") == datetime(2025, 8, 20, 20, 18, tzinfo=timezone.utc)

def test_iso_without_offset_stays_naive(parser):
    parsed = parser.parse("2024-01-01T10:03:00")
    assert parsed == datetime(2024, 1, 1, 10, 3)
    assert parsed.tzinfo is None

def test_iso_with_z_suffix(parser):
    assert parser.parse("2024-01-01T10:03:00Z") == datetime(2024, 1, 1, 10, 3, tzinfo=timezone.utc)

def test_iso_with_offset(parser):
    parsed = parser.parse("2024-01-01T10:03:00-05:00")
    assert parsed.utcoffset() == timedelta(hours=-5)
    assert parsed.hour == 10

def test_date_only(parser):
    assert parser.parse("2024-01-01") == datetime(2024, 1, 1)

def test_datetime_and_date_objects(parser):
    now = datetime(2024, 5, 5, 12, 0)
    assert parser.parse(now) is now
    assert parser.parse(date(2024, 5, 5)) == datetime(2024, 5, 5)

def test_epoch_milliseconds(parser):
    assert parser.parse(60000) == datetime(1970, 1, 1, 0, 1, tzinfo=timezone.utc)

@pytest.mark.parametrize("candidate", [
    None, "", "   ", "not-a-date", "2024-13-45T99:00:00", "10:00", True,
    float("nan"), 1e30, {"minute_bucket": "2024-01-01"}
])
def test_unrecognised_input_returns_none(parser, candidate):
    assert parser.parse(candidate) is None

def test_display_timezone_converts_aware_results():
    try:
        ZoneInfo("America/Lima")
    except Exception:
        pytest.skip("tz database not available")
    parser = SQLiteTimestampParser(display_timezone="America/Lima")

    parsed = parser.parse("2024-01-01 15:00:00")
    assert parsed.hour == 10
    # Offset-less text is read as display wall clock
    local = parser.parse("2024-01-01T15:00:00")
    assert local.hour == 15
    assert local.tzinfo == ZoneInfo("America/Lima")
    assert local > parsed

def test_unknown_display_timezone():
    with pytest.raises(ConfigurationError):
        SQLiteTimestampParser(display_timezone="Not/AZone")
