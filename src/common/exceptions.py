from typing import Any, Optional


class SeriesError(Exception):
    """Base exception for all vehicle count series errors."""
    pass

class ConfigWarning(SeriesError, UserWarning):
    """Produced when the aggregation interval is invalid and the default is used."""

    def __init__(self, message: str, requested_ms: Any = None, fallback_minutes: int = 10):
        super().__init__(message)
        self.requested_ms = requested_ms
        self.fallback_minutes = fallback_minutes

class RecordSkipped(SeriesError):
    """Produced when a record (or its vehicle count) cannot be used."""

    MALFORMED = "malformed"
    INVALID_TIMESTAMP = "invalid_timestamp"
    INVALID_VEHICLE_COUNT = "invalid_vehicle_count"

    def __init__(self, index: int, reason: str, value: Optional[Any] = None):
        super().__init__(f"Record {index} skipped: {reason} ({value!r})")
        self.index = index
        self.reason = reason
        self.value = value

class ConfigurationError(SeriesError):
    """Raised when configuration is invalid."""
    pass
