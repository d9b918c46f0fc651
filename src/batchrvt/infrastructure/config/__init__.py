"""Configuration infrastructure."""

from batchrvt.infrastructure.config.loader import (
    BatchRvtConfig,
    ConfigLoader,
    load_config,
    get_data_folder_path,
)

__all__ = ['BatchRvtConfig', 'ConfigLoader', 'load_config', 'get_data_folder_path']
