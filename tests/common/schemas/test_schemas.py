import pytest
from pydantic import ValidationError
from src.common.schemas import SeriesPayload, LegendEntry, DiagnosticsPayload

# --- Series Tests ---
def test_series_payload_valid():
    payload = SeriesPayload(
        labels=["10:00", "10:10"], values=[8, 2.5],
        severities=["HIGH", "VERY_LOW"], colors=["#FB923C", "#DBEAFE"],
        thresholds=(2.5, 2.5, 8, 8), interval_minutes=10
    )
    assert payload.values == [8, 2.5]
    assert isinstance(payload.values[0], int)

def test_series_payload_defaults():
    payload = SeriesPayload()
    assert payload.labels == []
    assert payload.thresholds == (0, 0, 0, 0)

def test_series_payload_mismatched_lengths():
    with pytest.raises(ValidationError):
        SeriesPayload(labels=["10:00"], values=[], severities=[], colors=[])

def test_series_payload_unordered_thresholds():
    with pytest.raises(ValidationError):
        SeriesPayload(thresholds=(5, 4, 3, 2))

def test_series_payload_invalid_interval():
    with pytest.raises(ValidationError):
        SeriesPayload(interval_minutes=70)

# --- Legend Tests ---
def test_legend_entry_valid():
    entry = LegendEntry(tier="LOW", label="Low", color="#93C5FD")
    assert entry.color == "#93C5FD"

def test_legend_entry_invalid_color():
    with pytest.raises(ValidationError):
        LegendEntry(tier="LOW", label="Low", color="blue")

# --- Diagnostics Tests ---
def test_diagnostics_payload_invalid_count():
    with pytest.raises(ValidationError):
        DiagnosticsPayload(
            records_received=-1, records_processed=0, records_skipped=0,
            invalid_counts=0, error_count=0, bucket_count=0, interval_minutes=10
        )
