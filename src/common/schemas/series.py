from typing import Dict, List, Tuple, Union
from pydantic import BaseModel, Field, model_validator

Number = Union[int, float]

class SeriesPayload(BaseModel):
    """
    Time-bucketed vehicle count series handed to the chart renderer.
    """
    labels: List[str] = Field(default_factory=list, description="Time-of-day label per bucket (ascending)")
    values: List[Number] = Field(default_factory=list, description="Total vehicles per bucket")
    severities: List[str] = Field(default_factory=list, description="Severity tier per bucket")
    colors: List[str] = Field(default_factory=list, description="Hex colour per bucket")
    thresholds: Tuple[Number, Number, Number, Number] = Field((0, 0, 0, 0), description="Quintile cut points q20, q40, q60, q80")
    interval_minutes: int = Field(10, ge=1, le=60, description="Bucket width in minutes")

    @model_validator(mode="after")
    def check_parallel_lengths(self) -> "SeriesPayload":
        lengths = {len(self.labels), len(self.values), len(self.severities), len(self.colors)}
        if len(lengths) > 1:
            raise ValueError("labels, values, severities and colors must have the same length")
        if list(self.thresholds) != sorted(self.thresholds):
            raise ValueError("thresholds must be non-decreasing")
        return self

class LegendEntry(BaseModel):
    """
    One row of the traffic level legend.
    """
    tier: str = Field(..., description="Severity tier name")
    label: str = Field(..., description="Human readable tier label")
    color: str = Field(..., pattern=r"^#[0-9A-Fa-f]{6}$", description="Hex colour")

class DiagnosticsPayload(BaseModel):
    """
    Skip/warning counts reported next to a series.
    """
    records_received: int = Field(..., ge=0)
    records_processed: int = Field(..., ge=0)
    records_skipped: int = Field(..., ge=0)
    invalid_counts: int = Field(..., ge=0)
    error_count: int = Field(..., ge=0)
    bucket_count: int = Field(..., ge=0)
    interval_minutes: int = Field(..., ge=1, le=60)
    empty_input: bool = False
    degenerate: bool = False
    warnings: List[str] = Field(default_factory=list)

class SeriesReport(BaseModel):
    """
    Series plus its diagnostics, as written by the command line script.
    """
    series: SeriesPayload
    diagnostics: DiagnosticsPayload
    legend: List[LegendEntry] = Field(default_factory=list)
    chart: Dict = Field(default_factory=dict)
