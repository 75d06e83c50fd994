"""
Application module initialization.
"""
from .interval import resolve_interval, IntervalResolution, DEFAULT_INTERVAL_MS
from .bucketizer import bucketize, floor_to_interval, instant_key
from .aggregator import BucketAggregator, aggregate_buckets
from .classifier import Classification, calculate_quintiles, classify_value, classify_values
from .series_builder import build_series
from .pipeline import VehicleCountSeriesPipeline, build_vehicle_count_series
