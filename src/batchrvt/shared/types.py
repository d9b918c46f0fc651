"""Common type definitions."""

from typing import Any, Dict, List, Union
from pathlib import Path

# Type alias for paths
PathLike = Union[str, Path]

# Parsed JSON containers as produced by the json module
JsonObject = Dict[str, Any]
JsonArray = List[Any]
