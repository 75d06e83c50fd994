from typing import Optional

from ..domain.entities import AggregatedBuckets, VehicleCountSeries
from .classifier import Classification, classify_values

def build_series(
    aggregated: AggregatedBuckets,
    interval_minutes: int,
    classification: Optional[Classification] = None
) -> VehicleCountSeries:
    """
    Assembles labels, values, tiers and colours into the final series.
    """
    if classification is None:
        classification = classify_values(aggregated.values)

    severities = list(classification.severities)
    return VehicleCountSeries(
        labels=list(aggregated.labels),
        values=list(aggregated.values),
        severities=severities,
        colors=[tier.color for tier in severities],
        thresholds=classification.thresholds,
        interval_minutes=interval_minutes,
        buckets=aggregated.buckets
    )
