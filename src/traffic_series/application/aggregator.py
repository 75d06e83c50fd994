from typing import List, Mapping

from ..domain.entities import AggregatedBuckets, Bucket

DEFAULT_LABEL_FORMAT = "%H:%M"

class BucketAggregator:
    """
    Orders buckets by time and extracts the chart labels and totals.
    """
    def __init__(self, label_format: str = DEFAULT_LABEL_FORMAT):
        self.label_format = label_format

    def aggregate(self, buckets: Mapping[int, Bucket]) -> AggregatedBuckets:
        # Keys are unique bucket starts, so the order is strict
        ordered: List[Bucket] = [buckets[key] for key in sorted(buckets)]
        return AggregatedBuckets(
            buckets=tuple(ordered),
            labels=tuple(b.bucket_start.strftime(self.label_format) for b in ordered),
            values=tuple(b.total_vehicles for b in ordered)
        )

def aggregate_buckets(buckets: Mapping[int, Bucket], label_format: str = DEFAULT_LABEL_FORMAT) -> AggregatedBuckets:
    return BucketAggregator(label_format).aggregate(buckets)
