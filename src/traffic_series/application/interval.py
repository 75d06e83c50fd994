"""
Aggregation interval resolution: milliseconds in, whole minutes out.
"""
import numbers
from dataclasses import dataclass
from typing import Any, Optional

from ...common.exceptions import ConfigWarning
from ...common.logging import setup_logger

logger = setup_logger(__name__)

MS_PER_MINUTE = 60000
MIN_INTERVAL_MS = 60000      # 1 minute
MAX_INTERVAL_MS = 3600000    # 60 minutes
DEFAULT_INTERVAL_MS = 600000
DEFAULT_INTERVAL_MINUTES = 10
MIN_INTERVAL_MINUTES = 1
MAX_INTERVAL_MINUTES = 60

@dataclass(frozen=True)
class IntervalResolution:
    minutes: int
    requested_ms: Any
    warning: Optional[ConfigWarning] = None

    @property
    def defaulted(self) -> bool:
        return self.warning is not None

def _is_real_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)

def resolve_interval(aggregation_interval_ms: Any = DEFAULT_INTERVAL_MS) -> IntervalResolution:
    """
    Converts the requested interval to minutes.

    The raw millisecond value is validated against [MIN_INTERVAL_MS, MAX_INTERVAL_MS];
    outside that window the default of 10 minutes is used and a ConfigWarning is
    returned. The minute value is then always clamped to [1, 60].
    """
    if aggregation_interval_ms is None:
        aggregation_interval_ms = DEFAULT_INTERVAL_MS

    warning = None
    if _is_real_number(aggregation_interval_ms) and \
            MIN_INTERVAL_MS <= aggregation_interval_ms <= MAX_INTERVAL_MS:
        minutes = int(aggregation_interval_ms // MS_PER_MINUTE)
    else:
        warning = ConfigWarning(
            f"Invalid aggregation interval: {aggregation_interval_ms!r}ms. "
            f"Must be between {MIN_INTERVAL_MS}ms (1 minute) and {MAX_INTERVAL_MS}ms (60 minutes). "
            f"Using default {DEFAULT_INTERVAL_MINUTES} minutes.",
            requested_ms=aggregation_interval_ms,
            fallback_minutes=DEFAULT_INTERVAL_MINUTES
        )
        logger.warning(str(warning))
        minutes = DEFAULT_INTERVAL_MINUTES

    minutes = max(MIN_INTERVAL_MINUTES, min(MAX_INTERVAL_MINUTES, minutes))
    return IntervalResolution(minutes=minutes, requested_ms=aggregation_interval_ms, warning=warning)
