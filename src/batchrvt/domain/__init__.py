"""Domain layer package.

``ScriptData`` lives in :mod:`batchrvt.domain.script_data` and is imported
from there; it depends on the shared file helpers, which depend on the
exceptions exported here.
"""

from .exceptions import (
    DomainException,
    ConfigurationError,
    ScriptDataError,
    ScriptDataNotFoundError,
    MalformedContentError,
    StorageIOError,
    InvalidSessionPathError,
)
from .options import (
    RevitProcessingOption,
    CentralFileOpenOption,
    WorksetConfigurationOption,
)
from .settings import (
    Setting,
    StringSetting,
    BooleanSetting,
    IntegerSetting,
    EnumSetting,
    ListSetting,
    PersistentSettings,
)

__all__ = [
    # Exceptions
    "DomainException",
    "ConfigurationError",
    "ScriptDataError",
    "ScriptDataNotFoundError",
    "MalformedContentError",
    "StorageIOError",
    "InvalidSessionPathError",
    # Options
    "RevitProcessingOption",
    "CentralFileOpenOption",
    "WorksetConfigurationOption",
    # Settings
    "Setting",
    "StringSetting",
    "BooleanSetting",
    "IntegerSetting",
    "EnumSetting",
    "ListSetting",
    "PersistentSettings",
]
