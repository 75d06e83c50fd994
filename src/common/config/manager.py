from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pathlib import Path
from typing import Any, Mapping, Union

from ..exceptions import ConfigurationError
from .models import AppConfig, SeriesConfig

class ConfigManager:
    """Centraliza la carga y validación de configuración"""

    def __init__(self, config_dir: Path = Path("conf")):
        self.config_dir = Path(config_dir)

    def load_series_config(self, profile: str = "default") -> SeriesConfig:
        """Carga configuración de la serie con validación"""
        config_path = self.config_dir / "series" / f"{profile}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        return self.to_series_config(OmegaConf.load(config_path))

    @staticmethod
    def to_app_config(cfg: Union[DictConfig, Mapping[str, Any]]) -> AppConfig:
        """Valida la configuración compuesta por Hydra contra el esquema AppConfig"""
        schema = OmegaConf.structured(AppConfig)
        try:
            merged = OmegaConf.merge(schema, cfg)
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid config: {e}") from e
        return OmegaConf.to_object(merged)

    @staticmethod
    def to_series_config(cfg: Union[DictConfig, Mapping[str, Any], None]) -> SeriesConfig:
        """Valida un nodo de configuración contra el esquema SeriesConfig"""
        schema = OmegaConf.structured(SeriesConfig)
        if cfg is None:
            return OmegaConf.to_object(schema)
        try:
            merged = OmegaConf.merge(schema, cfg)
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid series config: {e}") from e
        return OmegaConf.to_object(merged)
