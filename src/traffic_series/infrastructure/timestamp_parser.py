"""
Default timestamp parser for analysis records.

SQLite stores datetimes as UTC text without an offset ("2025-08-20 20:18:00"),
so that form is read as UTC. ISO strings keep whatever offset they carry.
With a display timezone, aware results are converted into it and naive
results are taken to be wall clock in it.
"""
import math
import numbers
import re
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ...common.exceptions import ConfigurationError

SQLITE_DATETIME = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}(:\d{2}(\.\d{3}|\.\d{6})?)?$")
DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

class SQLiteTimestampParser:
    """
    Turns the timestamp dialects served by the detection API into datetimes.
    Returns None for anything it does not recognise.
    """
    def __init__(self, display_timezone: Optional[str] = None):
        self.display_timezone = display_timezone
        self._tz = None
        if display_timezone:
            try:
                self._tz = ZoneInfo(display_timezone)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ConfigurationError(f"Unknown display timezone: {display_timezone}") from e

    def parse(self, candidate: Any) -> Optional[datetime]:
        instant = self._parse(candidate)
        if instant is None or self._tz is None:
            return instant
        # Offset-less text is already display wall clock
        if instant.tzinfo is None:
            return instant.replace(tzinfo=self._tz)
        return instant.astimezone(self._tz)

    def _parse(self, candidate: Any) -> Optional[datetime]:
        if candidate is None or isinstance(candidate, bool):
            return None
        if isinstance(candidate, datetime):
            return candidate
        if isinstance(candidate, date):
            return datetime(candidate.year, candidate.month, candidate.day)
        if isinstance(candidate, numbers.Real):
            return self._from_epoch_ms(candidate)
        if not isinstance(candidate, str):
            return None

        text = candidate.strip()
        if not text:
            return None

        try:
            if SQLITE_DATETIME.match(text):
                return datetime.fromisoformat(text).replace(tzinfo=timezone.utc)
            if "T" in text:
                if text.endswith("Z"):
                    text = text[:-1] + "+00:00"
                return datetime.fromisoformat(text)
            if DATE_ONLY.match(text):
                return datetime.fromisoformat(text)
        except ValueError:
            return None
        return None

    @staticmethod
    def _from_epoch_ms(value: float) -> Optional[datetime]:
        if not math.isfinite(value):
            return None
        try:
            return _EPOCH + timedelta(milliseconds=value)
        except OverflowError:
            return None
