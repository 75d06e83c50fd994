"""
Domain entities for the vehicle count series.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Iterator, List, Tuple, Union

from ...common.schemas import SeriesPayload

Number = Union[int, float]

class SeverityTier(str, Enum):
    """Traffic severity relative to the run's own distribution"""
    NONE = "NONE"
    VERY_LOW = "VERY_LOW"
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"
    VERY_HIGH = "VERY_HIGH"

    @property
    def color(self) -> str:
        return TIER_COLORS[self]

    @property
    def label(self) -> str:
        return TIER_LABELS[self]

# Blue -> yellow -> red: higher traffic reads as problematic
TIER_COLORS: Dict[SeverityTier, str] = {
    SeverityTier.NONE: "#F3F4F6",
    SeverityTier.VERY_LOW: "#DBEAFE",
    SeverityTier.LOW: "#93C5FD",
    SeverityTier.MODERATE: "#FDE047",
    SeverityTier.HIGH: "#FB923C",
    SeverityTier.VERY_HIGH: "#EF4444",
}

TIER_LABELS: Dict[SeverityTier, str] = {
    SeverityTier.NONE: "No Traffic",
    SeverityTier.VERY_LOW: "Very Low",
    SeverityTier.LOW: "Low",
    SeverityTier.MODERATE: "Moderate",
    SeverityTier.HIGH: "High",
    SeverityTier.VERY_HIGH: "Very High",
}

@dataclass(frozen=True)
class Observation:
    """
    One analysed camera frame: when it was taken and how many vehicles it had.
    """
    instant: datetime
    vehicle_count: Number = 0

@dataclass
class Bucket:
    """
    Fixed-width time window that observations are truncated into.
    """
    bucket_start: datetime
    total_vehicles: Number = 0
    sample_count: int = 0  # valid contributions
    error_count: int = 0  # records with an unusable vehicle count

    def add(self, observation: Observation):
        self.total_vehicles += observation.vehicle_count
        self.sample_count += 1

    def add_error(self):
        self.error_count += 1

@dataclass(frozen=True)
class QuintileThresholds:
    """
    Cut points splitting the non-zero bucket totals into five groups.
    """
    q20: Number = 0
    q40: Number = 0
    q60: Number = 0
    q80: Number = 0

    def __iter__(self) -> Iterator[Number]:
        return iter((self.q20, self.q40, self.q60, self.q80))

    def as_tuple(self) -> Tuple[Number, Number, Number, Number]:
        return (self.q20, self.q40, self.q60, self.q80)

    @property
    def is_zero(self) -> bool:
        return self.as_tuple() == (0, 0, 0, 0)

@dataclass(frozen=True)
class AggregatedBuckets:
    """
    Buckets in ascending time order, with their labels and totals.
    """
    buckets: Tuple[Bucket, ...] = ()
    labels: Tuple[str, ...] = ()
    values: Tuple[Number, ...] = ()

@dataclass(frozen=True)
class VehicleCountSeries:
    """
    Final ordered series: one label, value, tier and colour per bucket.
    """
    labels: List[str] = field(default_factory=list)
    values: List[Number] = field(default_factory=list)
    severities: List[SeverityTier] = field(default_factory=list)
    colors: List[str] = field(default_factory=list)
    thresholds: QuintileThresholds = field(default_factory=QuintileThresholds)
    interval_minutes: int = 10
    buckets: Tuple[Bucket, ...] = ()

    def __len__(self) -> int:
        return len(self.labels)

    def to_dict(self) -> Dict:
        return {
            'labels': list(self.labels),
            'values': list(self.values),
            'severities': [s.value for s in self.severities],
            'colors': list(self.colors),
            'thresholds': list(self.thresholds.as_tuple()),
            'interval_minutes': self.interval_minutes
        }

    def to_payload(self) -> SeriesPayload:
        return SeriesPayload(**self.to_dict())
