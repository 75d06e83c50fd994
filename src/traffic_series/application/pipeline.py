from collections.abc import Iterable as IterableABC, Mapping
from typing import Any, Iterable, Optional, Tuple

from ..domain import DiagnosticsObserver, TimestampParser, VehicleCountSeries
from ..infrastructure.timestamp_parser import SQLiteTimestampParser
from ...common.config.models import SeriesConfig
from ...common.logging import setup_logger, log_execution_time
from ...common.metrics import DiagnosticsCollector, RunDiagnostics
from .aggregator import BucketAggregator, DEFAULT_LABEL_FORMAT
from .bucketizer import bucketize
from .classifier import classify_values
from .interval import DEFAULT_INTERVAL_MS, resolve_interval
from .series_builder import build_series

logger = setup_logger(__name__)

def _as_records(records: Any) -> Iterable[Any]:
    if records is None:
        return []
    # A lone mapping or scalar is treated as a one-record batch
    if isinstance(records, (Mapping, str, bytes)) or not isinstance(records, IterableABC):
        return [records]
    return records

class VehicleCountSeriesPipeline:
    """
    Orchestrates the series pipeline:
    Interval -> Bucketizer -> Aggregator -> Classifier -> Series Builder

    Every run starts from scratch; nothing is cached between calls.
    """
    def __init__(
        self,
        parser: Optional[TimestampParser] = None,
        label_format: str = DEFAULT_LABEL_FORMAT,
        default_interval_ms: Any = DEFAULT_INTERVAL_MS,
        observer: Optional[DiagnosticsObserver] = None
    ):
        self.parser = parser or SQLiteTimestampParser()
        self.aggregator = BucketAggregator(label_format)
        self.default_interval_ms = default_interval_ms
        self.observer = observer

    @classmethod
    def from_config(
        cls,
        config: SeriesConfig,
        observer: Optional[DiagnosticsObserver] = None
    ) -> "VehicleCountSeriesPipeline":
        return cls(
            parser=SQLiteTimestampParser(display_timezone=config.display_timezone),
            label_format=config.label_format,
            default_interval_ms=config.aggregation_interval_ms,
            observer=observer
        )

    def run(
        self,
        records: Optional[Iterable[Any]],
        aggregation_interval_ms: Any = None
    ) -> VehicleCountSeries:
        """
        Builds the series for a batch of records.
        """
        series, _ = self.run_with_diagnostics(records, aggregation_interval_ms)
        return series

    @log_execution_time(logger)
    def run_with_diagnostics(
        self,
        records: Optional[Iterable[Any]],
        aggregation_interval_ms: Any = None
    ) -> Tuple[VehicleCountSeries, RunDiagnostics]:
        if aggregation_interval_ms is None:
            aggregation_interval_ms = self.default_interval_ms

        collector = DiagnosticsCollector()
        interval = resolve_interval(aggregation_interval_ms)
        collector.record_warning(interval.warning)

        buckets = bucketize(_as_records(records), interval.minutes, self.parser, collector)
        aggregated = self.aggregator.aggregate(buckets)
        classification = classify_values(aggregated.values)
        series = build_series(aggregated, interval.minutes, classification)

        diagnostics = collector.get_diagnostics(
            bucket_count=len(series),
            interval_minutes=interval.minutes,
            degenerate=classification.degenerate
        )
        logger.info(
            f"Series built: {diagnostics.records_processed}/{diagnostics.records_received} records, "
            f"{diagnostics.bucket_count} buckets of {interval.minutes} min, "
            f"{diagnostics.error_count} errors"
        )
        self._notify(diagnostics)
        return series, diagnostics

    def _notify(self, diagnostics: RunDiagnostics):
        if self.observer is None:
            return
        try:
            self.observer(diagnostics)
        except Exception as e:
            logger.error(f"Diagnostics observer failed: {e}", exc_info=True)

def build_vehicle_count_series(
    records: Optional[Iterable[Any]],
    aggregation_interval_ms: Any = DEFAULT_INTERVAL_MS,
    parser: Optional[TimestampParser] = None,
    observer: Optional[DiagnosticsObserver] = None,
    label_format: str = DEFAULT_LABEL_FORMAT
) -> VehicleCountSeries:
    """
    Convenience wrapper around VehicleCountSeriesPipeline.run.
    """
    pipeline = VehicleCountSeriesPipeline(
        parser=parser,
        label_format=label_format,
        observer=observer
    )
    return pipeline.run(records, aggregation_interval_ms)
