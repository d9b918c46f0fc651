"""Processing option enumerations stored in script data by member name."""

from enum import Enum


class RevitProcessingOption(Enum):
    """How the batch session hands model files to the task script."""

    BatchRevitFileProcessing = 0
    SingleRevitTaskProcessing = 1


class CentralFileOpenOption(Enum):
    """How a workshared central file is opened."""

    Detach = 0
    CreateNewLocal = 1


class WorksetConfigurationOption(Enum):
    """Which worksets are opened with the model."""

    CloseAllWorksets = 0
    OpenAllWorksets = 1
    OpenLastViewed = 2
