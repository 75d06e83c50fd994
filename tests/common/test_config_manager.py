import pytest
from pathlib import Path
from omegaconf import OmegaConf
from src.common.config import ConfigManager, SeriesConfig, AppConfig
from src.common.exceptions import ConfigurationError

CONF_DIR = Path(__file__).resolve().parents[2] / "conf"

def test_load_default_series_config():
    config = ConfigManager(CONF_DIR).load_series_config()
    assert isinstance(config, SeriesConfig)
    assert config.aggregation_interval_ms == 600000
    assert config.label_format == "%H:%M"
    assert config.display_timezone is None

def test_to_app_config_from_composed_config():
    composed = OmegaConf.load(CONF_DIR / "config.yaml")
    composed.pop("defaults")
    composed.series = OmegaConf.load(CONF_DIR / "series" / "default.yaml")

    config = ConfigManager.to_app_config(composed)
    assert isinstance(config, AppConfig)
    assert isinstance(config.series, SeriesConfig)
    assert config.series.aggregation_interval_ms == 600000
    assert config.logging.level == "INFO"
    assert config.input_path is None

def test_to_app_config_rejects_bad_types():
    with pytest.raises(ConfigurationError):
        ConfigManager.to_app_config({"series": {"aggregation_interval_ms": "soon"}})

def test_missing_profile(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigManager(tmp_path).load_series_config("missing")

def test_invalid_value_type(tmp_path):
    (tmp_path / "series").mkdir()
    (tmp_path / "series" / "bad.yaml").write_text("aggregation_interval_ms: ten minutes\n")
    with pytest.raises(ConfigurationError):
        ConfigManager(tmp_path).load_series_config("bad")

def test_unknown_key(tmp_path):
    (tmp_path / "series").mkdir()
    (tmp_path / "series" / "extra.yaml").write_text("refresh_seconds: 30\n")
    with pytest.raises(ConfigurationError):
        ConfigManager(tmp_path).load_series_config("extra")

def test_to_series_config_from_mapping():
    config = ConfigManager.to_series_config({"aggregation_interval_ms": 300000})
    assert config.aggregation_interval_ms == 300000
    assert config.label_format == "%H:%M"

def test_to_series_config_defaults():
    assert ConfigManager.to_series_config(None) == SeriesConfig()
