from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .exceptions import ConfigWarning, RecordSkipped

@dataclass
class RunDiagnostics:
    """Skip and warning counts for a single pipeline run"""
    records_received: int
    records_processed: int
    records_skipped: int
    invalid_counts: int
    bucket_count: int
    interval_minutes: int
    empty_input: bool = False
    degenerate: bool = False
    warnings: List[ConfigWarning] = field(default_factory=list)
    skipped: List[RecordSkipped] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return self.records_skipped + self.invalid_counts

    def to_dict(self) -> Dict:
        return {
            'records_received': self.records_received,
            'records_processed': self.records_processed,
            'records_skipped': self.records_skipped,
            'invalid_counts': self.invalid_counts,
            'error_count': self.error_count,
            'bucket_count': self.bucket_count,
            'interval_minutes': self.interval_minutes,
            'empty_input': self.empty_input,
            'degenerate': self.degenerate,
            'warnings': [str(w) for w in self.warnings],
        }


class DiagnosticsCollector:
    """Collects skip/warning events while a run is in progress"""

    def __init__(self):
        self.records_received = 0
        self.records_processed = 0
        self.warnings: List[ConfigWarning] = []
        self.skipped: List[RecordSkipped] = []

    def record_received(self):
        self.records_received += 1

    def record_processed(self):
        self.records_processed += 1

    def record_skipped(self, event: RecordSkipped):
        self.skipped.append(event)

    def record_warning(self, warning: Optional[ConfigWarning]):
        if warning is not None:
            self.warnings.append(warning)

    def get_diagnostics(
        self,
        bucket_count: int,
        interval_minutes: int,
        degenerate: bool = False
    ) -> RunDiagnostics:
        invalid_counts = sum(
            1 for s in self.skipped if s.reason == RecordSkipped.INVALID_VEHICLE_COUNT
        )
        return RunDiagnostics(
            records_received=self.records_received,
            records_processed=self.records_processed,
            records_skipped=len(self.skipped) - invalid_counts,
            invalid_counts=invalid_counts,
            bucket_count=bucket_count,
            interval_minutes=interval_minutes,
            empty_input=self.records_received == 0,
            degenerate=degenerate,
            warnings=list(self.warnings),
            skipped=list(self.skipped)
        )
