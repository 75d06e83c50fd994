import pytest
from src.traffic_series.application.pipeline import VehicleCountSeriesPipeline
from src.traffic_series.infrastructure.timestamp_parser import SQLiteTimestampParser

@pytest.fixture
def parser():
    return SQLiteTimestampParser()

@pytest.fixture
def pipeline(parser):
    return VehicleCountSeriesPipeline(parser=parser)

@pytest.fixture
def minute_records():
    # Per-image rows as served by the detection API, deliberately out of order
    return [
        {"minute_bucket": "2024-01-01T10:12:00", "total_vehicles": 4},
        {"minute_bucket": "2024-01-01T10:00:00", "total_vehicles": 5},
        {"minute_bucket": "2024-01-01T10:03:00", "total_vehicles": 3},
        {"minute_bucket": "2024-01-01T10:25:00", "total_vehicles": 0},
        {"minute_bucket": "2024-01-01T10:31:00", "total_vehicles": 9},
        {"minute_bucket": "2024-01-01T10:47:00", "total_vehicles": 2},
    ]
