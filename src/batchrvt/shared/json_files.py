"""JSON and text file helpers that raise the script-data error taxonomy.

These helpers never swallow errors. Callers that need the boolean or
absent-result contract catch :class:`ScriptDataError` at their boundary.
"""

import json
from pathlib import Path
from typing import Any

from batchrvt.domain.exceptions import (
    MalformedContentError,
    ScriptDataNotFoundError,
    StorageIOError,
)
from batchrvt.shared.types import JsonArray, JsonObject, PathLike

JSON_INDENT = 4


def read_text(path: PathLike) -> str:
    """
    Read a whole UTF-8 text file, dropping a leading byte-order mark.

    Raises:
        ScriptDataNotFoundError: If the file does not exist
        StorageIOError: If the file cannot be read
        MalformedContentError: If the bytes are not valid UTF-8
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8-sig') as f:
            return f.read()
    except FileNotFoundError as e:
        raise ScriptDataNotFoundError(f"File not found: {path}") from e
    except UnicodeDecodeError as e:
        raise MalformedContentError(f"File is not valid UTF-8: {path}") from e
    except OSError as e:
        raise StorageIOError(f"Failed to read {path}: {e}") from e


def write_text(path: PathLike, text: str) -> None:
    """
    Write ``text`` to ``path``, creating missing parent directories.

    The file is overwritten in place; there is no temp-file-and-rename step.

    Raises:
        StorageIOError: If a directory cannot be created or the file written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
    except OSError as e:
        raise StorageIOError(f"Failed to write {path}: {e}") from e


def parse_json(text: str) -> Any:
    """Parse JSON text into plain Python containers."""
    try:
        return json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        raise MalformedContentError(f"Invalid JSON: {e}") from e


def serialize_json(document: Any, indent: bool = True) -> str:
    """Serialize a JSON document, indented by default, keeping key order."""
    try:
        return json.dumps(
            document,
            indent=JSON_INDENT if indent else None,
            ensure_ascii=False,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise MalformedContentError(f"Value is not JSON serializable: {e}") from e


def read_json_document(path: PathLike) -> Any:
    """Read and parse a JSON file of any shape."""
    return parse_json(read_text(path))


def read_json_object(path: PathLike) -> JsonObject:
    """Read a JSON file whose root must be an object."""
    document = read_json_document(path)
    if not isinstance(document, dict):
        raise MalformedContentError(
            f"Expected a JSON object in {path}, got {type(document).__name__}"
        )
    return document


def read_json_array(path: PathLike) -> JsonArray:
    """Read a JSON file whose root must be an array."""
    document = read_json_document(path)
    if not isinstance(document, list):
        raise MalformedContentError(
            f"Expected a JSON array in {path}, got {type(document).__name__}"
        )
    return document


def write_json_document(path: PathLike, document: Any) -> None:
    """Serialize ``document`` with indentation and write it to ``path``."""
    write_text(path, serialize_json(document))
