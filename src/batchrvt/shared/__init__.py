"""Shared utilities package."""

from batchrvt.shared.logging import setup_logger, get_logger
from batchrvt.shared.retry import RetryStrategy
from batchrvt.shared.types import PathLike

__all__ = [
    "setup_logger",
    "get_logger",
    "RetryStrategy",
    "PathLike",
]
