"""Configuration loading and validation."""

import logging
import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, fields

from batchrvt.domain.exceptions import ConfigurationError
from batchrvt.shared.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_FILENAME = "batchrvt.yaml"
DEFAULT_DATA_FOLDER = Path("~/.batchrvt/data")

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class BatchRvtConfig:
    """Configuration shared by the session tools."""

    # Folder holding Session.ScriptData.*.json and Session.ProgressRecord.*.json
    data_folder: Path = DEFAULT_DATA_FOLDER

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    def __post_init__(self):
        """Normalize and validate configuration after initialization."""
        self.data_folder = Path(self.data_folder).expanduser()
        if self.log_file is not None:
            self.log_file = Path(self.log_file).expanduser()
        self.log_level = str(self.log_level).upper()
        self._validate()

    def _validate(self):
        """Validate configuration values."""
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(f"Invalid log_level: {self.log_level}")

        if not str(self.data_folder).strip():
            raise ConfigurationError("data_folder must not be empty")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


class ConfigLoader:
    """Loads and validates configuration from YAML files and environment variables."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config loader.

        Args:
            config_path: Optional path to YAML config file
        """
        self.config_path = Path(config_path) if config_path else Path(DEFAULT_CONFIG_FILENAME)
        self._logger = get_logger(__name__)

    def load(self, overrides: Optional[Dict[str, Any]] = None) -> BatchRvtConfig:
        """
        Load configuration from file and environment.

        Environment variables take precedence over the config file, and
        overrides take precedence over both.

        Returns:
            BatchRvtConfig instance

        Raises:
            ConfigurationError: If configuration is invalid
        """
        config_dict: Dict[str, Any] = {}

        if self.config_path.exists():
            self._logger.debug(f"Loading config from {self.config_path}")
            config_dict.update(self._load_from_file())
        else:
            self._logger.debug(f"Config file not found: {self.config_path}")

        config_dict.update(self._load_from_env())

        if overrides:
            for k, v in overrides.items():
                if v is None:
                    continue
                config_dict[k] = v

        valid_fields = {f.name for f in fields(BatchRvtConfig)}
        unknown = sorted(k for k in config_dict if k not in valid_fields)
        if unknown:
            self._logger.debug(f"Ignoring unknown config keys: {', '.join(unknown)}")

        filtered_config = {k: v for k, v in config_dict.items() if k in valid_fields}

        try:
            return BatchRvtConfig(**filtered_config)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    def _load_from_file(self) -> Dict[str, Any]:
        """Load configuration from the YAML file."""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                yaml_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read config {self.config_path}: {e}")

        if not isinstance(yaml_config, dict):
            raise ConfigurationError(
                f"Config file {self.config_path} must contain a mapping"
            )
        return yaml_config

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env_config = {}

        if data_folder := os.getenv("BATCHRVT_DATA_FOLDER"):
            env_config["data_folder"] = Path(data_folder)

        if log_level := os.getenv("BATCHRVT_LOG_LEVEL"):
            env_config["log_level"] = log_level

        if log_file := os.getenv("BATCHRVT_LOG_FILE"):
            env_config["log_file"] = Path(log_file)

        return env_config


def load_config(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> BatchRvtConfig:
    """Load configuration, honouring BATCHRVT_CONFIG when no path is given."""
    if config_path is None and (env_path := os.getenv("BATCHRVT_CONFIG")):
        config_path = Path(env_path)
    return ConfigLoader(config_path=config_path).load(overrides=overrides)


def get_data_folder_path() -> Path:
    """Process-wide data folder for session files."""
    return load_config().data_folder
