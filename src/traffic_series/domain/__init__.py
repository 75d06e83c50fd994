"""
Domain module initialization.
"""
from .entities import (
    SeverityTier,
    Observation,
    Bucket,
    QuintileThresholds,
    AggregatedBuckets,
    VehicleCountSeries
)
from .protocols import TimestampParser, DiagnosticsObserver
