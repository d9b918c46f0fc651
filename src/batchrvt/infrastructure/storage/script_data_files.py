"""Batch script-data files: a JSON array of script-data objects."""

from typing import Iterable, List

from batchrvt.domain.script_data import ScriptData
from batchrvt.shared import json_files
from batchrvt.shared.logging import get_logger
from batchrvt.shared.types import JsonObject, PathLike

logger = get_logger(__name__)


def read_script_data_list(file_path: PathLike) -> List[ScriptData]:
    """
    Read every object element of a batch file as a ScriptData.

    Array elements that are not JSON objects are skipped.

    Raises:
        ScriptDataNotFoundError: If the file does not exist
        MalformedContentError: If the file is not a JSON array
        StorageIOError: If the file cannot be read
    """
    script_datas = []
    skipped = 0

    for element in json_files.read_json_array(file_path):
        if not isinstance(element, dict):
            skipped += 1
            continue
        script_data = ScriptData()
        script_data.load(element)
        script_datas.append(script_data)

    if skipped:
        logger.debug(f"Skipped {skipped} non-object element(s) in {file_path}")

    return script_datas


def write_script_data_list(file_path: PathLike, script_datas: Iterable[ScriptData]) -> None:
    """
    Write records to a batch file as a JSON array, in the given order.

    Raises:
        MalformedContentError: If a field value cannot be serialized
        StorageIOError: If the file cannot be written
    """
    json_array = []
    for script_data in script_datas:
        json_object: JsonObject = {}
        script_data.store(json_object)
        json_array.append(json_object)

    json_files.write_json_document(file_path, json_array)
