"""Progress-record files: a single base-10 integer in plain text.

The running session is the only writer. Monitors poll the file and must
treat a failed read as "no progress yet", since a read can race a write.
"""

import re
from pathlib import Path
from typing import Optional

from batchrvt.domain.exceptions import MalformedContentError, ScriptDataError
from batchrvt.shared import json_files
from batchrvt.shared.logging import get_logger
from batchrvt.shared.retry import RetryStrategy
from batchrvt.shared.types import PathLike

logger = get_logger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

DEFAULT_POLL_ATTEMPTS = 5
DEFAULT_POLL_INTERVAL = 0.5


def parse_progress_text(text: str) -> int:
    """Parse progress-record content, ignoring surrounding whitespace."""
    stripped = text.strip()
    if not _INTEGER_PATTERN.fullmatch(stripped):
        raise MalformedContentError(f"Progress record is not an integer: {stripped!r}")
    return int(stripped)


def read_progress_number(progress_record_file_path: PathLike) -> int:
    """
    Read the progress number.

    Raises:
        ScriptDataNotFoundError: If the file does not exist
        MalformedContentError: If the content is not an integer
        StorageIOError: If the file cannot be read
    """
    return parse_progress_text(json_files.read_text(progress_record_file_path))


def write_progress_number(progress_record_file_path: PathLike, progress_number: int) -> None:
    """
    Write the progress number, creating parent directories.

    Raises:
        MalformedContentError: If ``progress_number`` is not an integer
        StorageIOError: If the file cannot be written
    """
    if not isinstance(progress_number, int) or isinstance(progress_number, bool):
        raise MalformedContentError(f"Progress number must be an integer, got {progress_number!r}")
    json_files.write_text(progress_record_file_path, str(progress_number))


def poll_progress_number(
    progress_record_file_path: PathLike,
    attempts: int = DEFAULT_POLL_ATTEMPTS,
    interval: float = DEFAULT_POLL_INTERVAL,
    strategy: Optional[RetryStrategy] = None
) -> int:
    """
    Read the progress number, retrying failed reads at a fixed interval.

    Args:
        progress_record_file_path: Progress-record file to poll
        attempts: Number of reads before giving up
        interval: Seconds between reads
        strategy: Optional retry strategy replacing ``attempts``/``interval``

    Returns:
        The first progress number read successfully

    Raises:
        ScriptDataError: The error from the last read if every attempt failed
    """
    if strategy is None:
        strategy = RetryStrategy(
            max_attempts=attempts,
            backoff_seconds=interval,
            exponential=False,
            jitter=False,
            exceptions=(ScriptDataError,),
        )

    logger.debug(f"Polling {Path(progress_record_file_path).name} (up to {strategy.max_attempts} reads)")
    return strategy.execute(read_progress_number, progress_record_file_path)
