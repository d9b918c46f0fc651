"""Public script-data and progress-record file operations.

Every function here is an error boundary: I/O failures and malformed
content are logged and reported as ``False`` or ``None``, never raised.
Callers who need the cause use the raising helpers in
:mod:`batchrvt.infrastructure.storage` directly.
"""

from typing import Iterable, List, Optional, Tuple

from batchrvt.domain.exceptions import ScriptDataError, ScriptDataNotFoundError
from batchrvt.domain.script_data import ScriptData
from batchrvt.infrastructure.storage import progress_record, session_paths
from batchrvt.infrastructure.storage.script_data_files import (
    read_script_data_list,
    write_script_data_list,
)
from batchrvt.shared.logging import get_logger
from batchrvt.shared.types import PathLike

logger = get_logger(__name__)


def load_many_from_file(file_path: PathLike) -> Optional[List[ScriptData]]:
    """
    Load all records from a batch script-data file.

    Returns:
        The records in file order, or None if the file is missing or any
        part of it cannot be read (never a partial list)
    """
    try:
        return read_script_data_list(file_path)
    except ScriptDataNotFoundError:
        logger.debug(f"Script data file not found: {file_path}")
        return None
    except ScriptDataError as e:
        logger.warning(f"Could not load script data from {file_path}: {e}")
        return None


def save_many_to_file(file_path: PathLike, script_datas: Iterable[ScriptData]) -> bool:
    """Save records to a batch script-data file, overwriting it."""
    try:
        write_script_data_list(file_path, script_datas)
    except ScriptDataError as e:
        logger.warning(f"Could not save script data to {file_path}: {e}")
        return False
    return True


def get_unique_script_data_file_path(data_folder: Optional[PathLike] = None) -> str:
    """
    Return ``<data folder>/Session.ScriptData.<uuid>.json`` for a new session.

    Raises:
        ConfigurationError: If ``data_folder`` is None and the configuration
            (config file or BATCHRVT_* environment) is invalid
    """
    return session_paths.unique_script_data_file_path(data_folder)


def get_progress_record_file_path(script_data_file_path: PathLike) -> str:
    """
    Return the progress-record path paired with a script-data path.

    Raises:
        InvalidSessionPathError: If the file name is not a script-data file name
    """
    return session_paths.progress_record_file_path(script_data_file_path)


def create_session_script_data(data_folder: Optional[PathLike] = None) -> Tuple[ScriptData, str]:
    """
    Start a new session record.

    Returns:
        A ScriptData whose ``session_id`` is set, and the script-data file
        path carrying the same id

    Raises:
        ConfigurationError: If ``data_folder`` is None and the configuration
            is invalid
    """
    session_id = session_paths.new_session_id()
    folder = session_paths.resolve_data_folder(data_folder)

    script_data = ScriptData()
    script_data.session_id.set_value(session_id)
    return script_data, session_paths.build_script_data_file_path(folder, session_id)


def set_progress_number(progress_record_file_path: PathLike, progress_number: int) -> bool:
    """Write the progress number, returning False on failure."""
    try:
        progress_record.write_progress_number(progress_record_file_path, progress_number)
    except ScriptDataError as e:
        logger.warning(f"Could not write progress record {progress_record_file_path}: {e}")
        return False
    return True


def get_progress_number(progress_record_file_path: PathLike) -> Optional[int]:
    """Read the progress number, or None if there is no readable number yet."""
    try:
        return progress_record.read_progress_number(progress_record_file_path)
    except ScriptDataError as e:
        logger.debug(f"No progress number in {progress_record_file_path}: {e}")
        return None


def wait_for_progress_number(
    progress_record_file_path: PathLike,
    attempts: int = progress_record.DEFAULT_POLL_ATTEMPTS,
    interval: float = progress_record.DEFAULT_POLL_INTERVAL
) -> Optional[int]:
    """
    Poll for the progress number, returning None if every read fails.

    At least one read is made, even when ``attempts`` is below 1.
    """
    attempts = max(1, attempts)
    try:
        return progress_record.poll_progress_number(
            progress_record_file_path, attempts=attempts, interval=interval
        )
    except ScriptDataError as e:
        logger.debug(f"No progress number in {progress_record_file_path} after {attempts} reads: {e}")
        return None
