"""Storage infrastructure."""

from batchrvt.infrastructure.storage.session_paths import (
    SCRIPT_DATA_FILENAME_PREFIX,
    PROGRESS_RECORD_FILENAME_PREFIX,
    JSON_FILE_EXTENSION,
    new_session_id,
    parse_script_data_file_name,
    unique_script_data_file_path,
    progress_record_file_path,
)
from batchrvt.infrastructure.storage.progress_record import (
    read_progress_number,
    write_progress_number,
    poll_progress_number,
)

__all__ = [
    'SCRIPT_DATA_FILENAME_PREFIX',
    'PROGRESS_RECORD_FILENAME_PREFIX',
    'JSON_FILE_EXTENSION',
    'new_session_id',
    'parse_script_data_file_name',
    'unique_script_data_file_path',
    'progress_record_file_path',
    'read_progress_number',
    'write_progress_number',
    'poll_progress_number',
]
