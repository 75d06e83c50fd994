import os
import sys
import hydra
from omegaconf import DictConfig, OmegaConf

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.common.config import ConfigManager
from src.common.logging import set_level, setup_logger
from src.traffic_series.application.pipeline import VehicleCountSeriesPipeline
from src.traffic_series.presentation.cli import build_report, load_records, summarize, write_report

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    app_cfg = ConfigManager.to_app_config(cfg)
    logger = setup_logger("build_series", app_cfg.logging.level)
    set_level(app_cfg.logging.level)
    logger.debug(f"Configuration:\n{OmegaConf.to_yaml(cfg)}")

    if not app_cfg.input_path:
        logger.error("input_path is required, e.g. python scripts/build_series.py input_path=data/counts.json")
        sys.exit(2)

    pipeline = VehicleCountSeriesPipeline.from_config(app_cfg.series)

    records = load_records(app_cfg.input_path)
    series, diagnostics = pipeline.run_with_diagnostics(records)

    report = build_report(series, diagnostics)
    text = write_report(report, app_cfg.output_path)
    if app_cfg.output_path:
        logger.info(f"Report written to {app_cfg.output_path}: {summarize(diagnostics)}")
    else:
        print(text)

if __name__ == "__main__":
    main()
