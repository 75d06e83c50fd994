from .models import SeriesConfig, LoggingConfig, AppConfig
from .manager import ConfigManager

__all__ = [
    "SeriesConfig",
    "LoggingConfig",
    "AppConfig",
    "ConfigManager",
]
