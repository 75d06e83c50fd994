from dataclasses import dataclass, field
from typing import Optional

@dataclass
class SeriesConfig:
    aggregation_interval_ms: int = 600000
    label_format: str = "%H:%M"
    display_timezone: Optional[str] = None

@dataclass
class LoggingConfig:
    level: str = "INFO"

@dataclass
class AppConfig:
    series: SeriesConfig = field(default_factory=SeriesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    input_path: Optional[str] = None
    output_path: Optional[str] = None
