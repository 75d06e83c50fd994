"""
Helpers for the build_series command line script.
"""
import csv
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..domain.entities import VehicleCountSeries
from ...common.exceptions import ConfigurationError
from ...common.metrics import RunDiagnostics
from ...common.schemas import DiagnosticsPayload, SeriesReport
from .chart import to_chart_data
from .legend import legend_entries

def _coerce_number(value: Any) -> Any:
    # CSV cells are text; leave anything non-numeric for the bucketizer to reject
    if not isinstance(value, str) or value.strip() == "":
        return value
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value

def load_records(path: str) -> List[Any]:
    """
    Reads analysis records from a JSON array or a CSV file with a header row.
    """
    input_path = Path(path)
    if not input_path.exists():
        raise FileNotFoundError(f"Input not found: {input_path}")

    if input_path.suffix.lower() == ".csv":
        with open(input_path, mode='r', newline='', encoding='utf-8') as f:
            rows = list(csv.DictReader(f))
        for row in rows:
            for key in ("total_vehicles", "totalVehicles"):
                if key in row:
                    row[key] = _coerce_number(row[key])
        return rows

    with open(input_path, mode='r', encoding='utf-8') as f:
        data = json.load(f)
    # The detection API wraps rows as {"data": [...]}
    if isinstance(data, dict) and isinstance(data.get("data"), list):
        data = data["data"]
    if not isinstance(data, list):
        raise ConfigurationError(f"Expected a JSON array of records in {input_path}")
    return data

def build_report(series: VehicleCountSeries, diagnostics: RunDiagnostics) -> SeriesReport:
    return SeriesReport(
        series=series.to_payload(),
        diagnostics=DiagnosticsPayload(**diagnostics.to_dict()),
        legend=legend_entries(),
        chart=to_chart_data(series)
    )

def write_report(report: SeriesReport, output_path: Optional[str] = None) -> str:
    text = report.model_dump_json(indent=2)
    if output_path:
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding='utf-8')
    return text

def summarize(diagnostics: RunDiagnostics) -> Dict[str, Any]:
    data = diagnostics.to_dict()
    return {k: data[k] for k in ("records_received", "records_processed", "error_count", "bucket_count")}
