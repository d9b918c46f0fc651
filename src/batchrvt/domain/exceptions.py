"""Domain exceptions for script-data persistence."""


class DomainException(Exception):
    """Base exception for all domain errors."""
    pass


class ConfigurationError(DomainException):
    """Raised when configuration is invalid."""
    pass


class ScriptDataError(DomainException):
    """Base exception for script-data and progress-record storage failures."""
    pass


class ScriptDataNotFoundError(ScriptDataError):
    """Raised when a script-data or progress-record file does not exist."""
    pass


class MalformedContentError(ScriptDataError):
    """Raised when file content cannot be parsed into the expected shape."""
    pass


class StorageIOError(ScriptDataError):
    """Raised when reading or writing a file fails at the OS level."""
    pass


class InvalidSessionPathError(ScriptDataError):
    """Raised when a file name does not follow the session naming convention."""
    pass
