import os
from dataclasses import asdict
from pathlib import Path

import yaml
from dotenv import find_dotenv, load_dotenv

from lunchctl.models.config import LoggingConfig, LunchctlConfig

DEFAULT_CONFIG_PATH = "config/lunchctl.yaml"


class ConfigManager:
    """Loads lunchctl settings from YAML, with environment overrides.

    The config path comes from LUNCHCTL_CONFIG_PATH, falling back to
    config/lunchctl.yaml. A .env file in the working directory or its
    parents is loaded first. LUNCHCTL_LAUNCHCTL_PATH and LUNCHCTL_LOG_LEVEL
    override the file.
    """

    def __init__(self, config_path: Path | None = None):
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path:
            load_dotenv(dotenv_path)

        if config_path is None:
            config_path = Path(os.getenv("LUNCHCTL_CONFIG_PATH", DEFAULT_CONFIG_PATH))
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self) -> LunchctlConfig:
        config_data = {}
        if self.config_path.exists():
            with open(self.config_path, "r") as f:
                config_data = yaml.safe_load(f) or {}

        if "logging" in config_data and isinstance(config_data["logging"], dict):
            config_data["logging"] = LoggingConfig(**config_data["logging"])

        config = LunchctlConfig(**config_data)

        launchctl_path = os.getenv("LUNCHCTL_LAUNCHCTL_PATH")
        if launchctl_path:
            config.launchctl_path = launchctl_path

        log_level = os.getenv("LUNCHCTL_LOG_LEVEL")
        if log_level:
            config.logging.level = log_level

        return config

    def save_config(self, config: LunchctlConfig):
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            yaml.safe_dump(asdict(config), f, default_flow_style=False)
