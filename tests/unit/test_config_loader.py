"""
Unit tests for configuration loading.
"""

import logging
from pathlib import Path

import pytest

from batchrvt.domain.exceptions import ConfigurationError
from batchrvt.infrastructure.config import (
    BatchRvtConfig,
    ConfigLoader,
    get_data_folder_path,
    load_config,
)


class TestBatchRvtConfig:
    """Test config dataclass validation."""

    def test_defaults(self):
        """Test default values."""
        config = BatchRvtConfig()

        assert config.data_folder == Path("~/.batchrvt/data").expanduser()
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.logging_level == logging.INFO

    def test_normalizes_values(self):
        """Test strings are converted to paths and levels upper-cased."""
        config = BatchRvtConfig(data_folder="/srv/data", log_level="debug", log_file="/tmp/x.log")

        assert config.data_folder == Path("/srv/data")
        assert config.log_level == "DEBUG"
        assert config.log_file == Path("/tmp/x.log")

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ConfigurationError):
            BatchRvtConfig(log_level="LOUD")


class TestConfigLoader:
    """Test layered config loading."""

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test a missing config file is not an error."""
        config = ConfigLoader(tmp_path / "missing.yaml").load()

        assert config == BatchRvtConfig()

    def test_yaml_file(self, tmp_path):
        """Test values are read from YAML."""
        path = tmp_path / "batchrvt.yaml"
        path.write_text(
            f"data_folder: {tmp_path / 'sessions'}\nlog_level: warning\nunknown_key: 1\n",
            encoding="utf-8",
        )

        config = ConfigLoader(path).load()

        assert config.data_folder == tmp_path / "sessions"
        assert config.log_level == "WARNING"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        """Test environment variables win over the file."""
        path = tmp_path / "batchrvt.yaml"
        path.write_text("data_folder: /from/file\nlog_level: ERROR\n", encoding="utf-8")
        monkeypatch.setenv("BATCHRVT_DATA_FOLDER", "/from/env")

        config = ConfigLoader(path).load()

        assert config.data_folder == Path("/from/env")
        assert config.log_level == "ERROR"

    def test_overrides_win(self, tmp_path, monkeypatch):
        """Test explicit overrides win over environment; None is skipped."""
        monkeypatch.setenv("BATCHRVT_DATA_FOLDER", "/from/env")
        monkeypatch.setenv("BATCHRVT_LOG_LEVEL", "DEBUG")

        config = ConfigLoader(tmp_path / "missing.yaml").load(
            overrides={"data_folder": Path("/from/cli"), "log_level": None}
        )

        assert config.data_folder == Path("/from/cli")
        assert config.log_level == "DEBUG"

    def test_non_mapping_yaml(self, tmp_path):
        """Test a YAML list is rejected."""
        path = tmp_path / "batchrvt.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigLoader(path).load()

    def test_invalid_yaml(self, tmp_path):
        """Test unparseable YAML is a configuration error."""
        path = tmp_path / "batchrvt.yaml"
        path.write_text("data_folder: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigLoader(path).load()

    def test_empty_yaml(self, tmp_path):
        """Test an empty file gives defaults."""
        path = tmp_path / "batchrvt.yaml"
        path.write_text("", encoding="utf-8")

        assert ConfigLoader(path).load() == BatchRvtConfig()


class TestLoadConfig:
    """Test module-level helpers."""

    def test_default_file_in_working_directory(self, tmp_path):
        """Test batchrvt.yaml in the working directory is picked up."""
        (tmp_path / "batchrvt.yaml").write_text("data_folder: /cwd/data\n", encoding="utf-8")

        assert load_config().data_folder == Path("/cwd/data")

    def test_config_env_var(self, tmp_path, monkeypatch):
        """Test BATCHRVT_CONFIG names the config file."""
        path = tmp_path / "other.yaml"
        path.write_text("data_folder: /env/named\n", encoding="utf-8")
        monkeypatch.setenv("BATCHRVT_CONFIG", str(path))

        assert get_data_folder_path() == Path("/env/named")
