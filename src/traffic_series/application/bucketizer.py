"""
Groups analysis records into fixed-width time buckets.
"""
import math
import numbers
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, Optional, Tuple

from ..domain.entities import Bucket, Observation, Number
from ..domain.protocols import TimestampParser
from ...common.exceptions import RecordSkipped
from ...common.logging import setup_logger
from ...common.metrics import DiagnosticsCollector

logger = setup_logger(__name__)

# Priority order; the camelCase spelling is accepted when the snake_case one is absent
TIMESTAMP_FIELDS = (
    ("minute_bucket", "minuteBucket"),
    ("created_at", "createdAt"),
    ("processed_at", "processedAt"),
)
VEHICLE_COUNT_FIELD = ("total_vehicles", "totalVehicles")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

def floor_to_interval(instant: datetime, interval_minutes: int) -> datetime:
    """
    Rounds down to the largest multiple of the interval within the instant's hour.
    Seconds and microseconds are zeroed.
    """
    minute = (instant.minute // interval_minutes) * interval_minutes
    return instant.replace(minute=minute, second=0, microsecond=0)

def instant_key(instant: datetime) -> int:
    """Epoch milliseconds; naive datetimes are read as UTC wall clock."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return (instant - _EPOCH) // timedelta(milliseconds=1)

def _get(record: Mapping, names: Tuple[str, str]) -> Any:
    for name in names:
        value = record.get(name)
        if value is not None:
            return value
    return None

def select_timestamp(record: Mapping) -> Any:
    """First non-empty timestamp candidate, by field priority."""
    for names in TIMESTAMP_FIELDS:
        value = _get(record, names)
        if value is not None and value != "":
            return value
    return None

def read_vehicle_count(record: Mapping) -> Tuple[bool, Any]:
    """
    Returns (valid, count). A missing or empty count is a valid zero.
    """
    value = _get(record, VEHICLE_COUNT_FIELD)
    if value is None or value == "":
        return True, 0
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False, value
    if not math.isfinite(value) or value < 0:
        return False, value
    return True, value

def _parse(parser: TimestampParser, candidate: Any) -> Optional[datetime]:
    try:
        instant = parser.parse(candidate)
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug(f"Timestamp parser rejected {candidate!r}: {e}")
        return None
    return instant if isinstance(instant, datetime) else None

def bucketize(
    records: Iterable[Any],
    interval_minutes: int,
    parser: TimestampParser,
    collector: Optional[DiagnosticsCollector] = None
) -> Dict[int, Bucket]:
    """
    Assigns every usable record to the bucket its timestamp floors to.

    Records that are not mappings, or whose timestamp cannot be parsed, are
    dropped. A record with an unusable vehicle count still opens its bucket
    but only adds to the bucket's error tally.
    """
    collector = collector or DiagnosticsCollector()
    buckets: Dict[int, Bucket] = {}

    for index, record in enumerate(records):
        collector.record_received()

        if not isinstance(record, Mapping):
            logger.debug(f"Invalid item at index {index}: {record!r}")
            collector.record_skipped(RecordSkipped(index, RecordSkipped.MALFORMED, record))
            continue

        candidate = select_timestamp(record)
        instant = _parse(parser, candidate)
        if instant is None:
            logger.debug(f"Invalid timestamp at index {index}: {candidate!r}")
            collector.record_skipped(RecordSkipped(index, RecordSkipped.INVALID_TIMESTAMP, candidate))
            continue

        bucket_start = floor_to_interval(instant, interval_minutes)
        key = instant_key(bucket_start)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = Bucket(bucket_start=bucket_start)
            buckets[key] = bucket

        valid, count = read_vehicle_count(record)
        if not valid:
            logger.debug(f"Invalid vehicle count at index {index}: {count!r}")
            bucket.add_error()
            collector.record_skipped(RecordSkipped(index, RecordSkipped.INVALID_VEHICLE_COUNT, count))
            continue

        bucket.add(Observation(instant=instant, vehicle_count=count))
        collector.record_processed()

    return buckets
