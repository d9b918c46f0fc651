"""File naming conventions for session script-data and progress-record files.

A session's files live side by side in the data folder and share its id::

    Session.ScriptData.<id>.json
    Session.ProgressRecord.<id>.json
"""

import uuid
from pathlib import Path
from typing import Optional

from batchrvt.domain.exceptions import InvalidSessionPathError
from batchrvt.infrastructure.config import get_data_folder_path
from batchrvt.shared.types import PathLike

SCRIPT_DATA_FILENAME_PREFIX = "Session.ScriptData."
PROGRESS_RECORD_FILENAME_PREFIX = "Session.ProgressRecord."
JSON_FILE_EXTENSION = ".json"


def new_session_id() -> str:
    """Generate a fresh random session id."""
    return str(uuid.uuid4())


def build_script_data_file_path(folder: PathLike, session_id: str) -> str:
    return str(Path(folder) / f"{SCRIPT_DATA_FILENAME_PREFIX}{session_id}{JSON_FILE_EXTENSION}")


def build_progress_record_file_path(folder: PathLike, session_id: str) -> str:
    return str(Path(folder) / f"{PROGRESS_RECORD_FILENAME_PREFIX}{session_id}{JSON_FILE_EXTENSION}")


def parse_script_data_file_name(script_data_file_path: PathLike) -> str:
    """
    Extract the session id from a script-data file path.

    Raises:
        InvalidSessionPathError: If the file name is not
            ``Session.ScriptData.<id>.json`` with a non-empty id
    """
    name = Path(script_data_file_path).name
    if not name.startswith(SCRIPT_DATA_FILENAME_PREFIX) or not name.endswith(JSON_FILE_EXTENSION):
        raise InvalidSessionPathError(
            f"Not a script-data file name "
            f"({SCRIPT_DATA_FILENAME_PREFIX}<id>{JSON_FILE_EXTENSION}): {script_data_file_path}"
        )

    session_id = name[len(SCRIPT_DATA_FILENAME_PREFIX):-len(JSON_FILE_EXTENSION)]
    if not session_id:
        raise InvalidSessionPathError(f"Script-data file name has no session id: {script_data_file_path}")
    return session_id


def resolve_data_folder(data_folder: Optional[PathLike] = None) -> Path:
    """Return ``data_folder``, or the configured data folder when it is None."""
    return Path(data_folder) if data_folder is not None else get_data_folder_path()


def unique_script_data_file_path(data_folder: Optional[PathLike] = None) -> str:
    """Path for a new script-data file under ``data_folder`` (default: configured folder)."""
    return build_script_data_file_path(resolve_data_folder(data_folder), new_session_id())


def progress_record_file_path(script_data_file_path: PathLike) -> str:
    """
    Progress-record path paired with a script-data path.

    Raises:
        InvalidSessionPathError: If the script-data file name does not follow
            the session naming convention
    """
    session_id = parse_script_data_file_name(script_data_file_path)
    return build_progress_record_file_path(Path(script_data_file_path).parent, session_id)
