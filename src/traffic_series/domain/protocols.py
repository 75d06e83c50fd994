"""
Domain protocols for the vehicle count series.
"""
from datetime import datetime
from typing import Any, Optional, Protocol

from ...common.metrics import RunDiagnostics

class TimestampParser(Protocol):
    """
    Protocol for the date parsing collaborator.
    Returns None when the candidate cannot be turned into an instant.
    """
    def parse(self, candidate: Any) -> Optional[datetime]:
        ...

class DiagnosticsObserver(Protocol):
    """
    Protocol for callers that want skip/warning counts after each run.
    """
    def __call__(self, diagnostics: RunDiagnostics) -> None:
        ...
