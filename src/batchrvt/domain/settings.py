"""Typed, key-bound settings that load and store themselves in a JSON object.

Every setting starts unset (``None``). The unset state is stored as JSON
``null`` and a ``null`` loads back as unset. When loading, a missing key or a
value of the wrong JSON shape leaves the setting untouched.
"""

from enum import Enum
from typing import Any, Generic, Iterable, Iterator, List, Optional, Tuple, Type, TypeVar

from batchrvt.domain.exceptions import MalformedContentError
from batchrvt.shared.types import JsonObject

T = TypeVar('T')
E = TypeVar('E', bound=Enum)


class Setting(Generic[T]):
    """Base class for a single setting bound to one JSON key."""

    def __init__(self, key: str):
        self._key = key
        self._value: Optional[T] = None

    @property
    def key(self) -> str:
        return self._key

    def get_value(self) -> Optional[T]:
        return self._value

    def set_value(self, value: Optional[T]) -> None:
        self._value = value

    def is_set(self) -> bool:
        return self._value is not None

    def load(self, json_object: JsonObject) -> None:
        """Read this setting's key from ``json_object`` if it has a usable value."""
        if self._key not in json_object:
            return

        raw = json_object[self._key]
        if raw is None:
            self._value = None
        elif self._accepts(raw):
            self._value = self._decode(raw)

    def store(self, json_object: JsonObject) -> None:
        """Write this setting's current value under its key."""
        json_object[self._key] = None if self._value is None else self._encode(self._value)

    def _accepts(self, raw: Any) -> bool:
        raise NotImplementedError

    def _decode(self, raw: Any) -> T:
        return raw

    def _encode(self, value: T) -> Any:
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._key!r}, value={self._value!r})"


class StringSetting(Setting[str]):

    def _accepts(self, raw: Any) -> bool:
        return isinstance(raw, str)


class BooleanSetting(Setting[bool]):

    def _accepts(self, raw: Any) -> bool:
        return isinstance(raw, bool)


class IntegerSetting(Setting[int]):

    def _accepts(self, raw: Any) -> bool:
        # bool is a subclass of int but true/false are not integers in JSON
        return isinstance(raw, int) and not isinstance(raw, bool)


class EnumSetting(Setting[E]):
    """Enum setting persisted as the member name."""

    def __init__(self, key: str, enum_type: Type[E]):
        super().__init__(key)
        self._enum_type = enum_type

    @property
    def enum_type(self) -> Type[E]:
        return self._enum_type

    def _accepts(self, raw: Any) -> bool:
        return isinstance(raw, str) and raw in self._enum_type.__members__

    def _decode(self, raw: Any) -> E:
        return self._enum_type[raw]

    def _encode(self, value: E) -> Any:
        if not isinstance(value, self._enum_type):
            raise MalformedContentError(
                f"{self._key} expects a {self._enum_type.__name__} member, got {value!r}"
            )
        return value.name


class ListSetting(Setting[List[str]]):
    """List-of-strings setting. Values are copied on the way in and out."""

    def get_value(self) -> Optional[List[str]]:
        return None if self._value is None else list(self._value)

    def set_value(self, value: Optional[Iterable[str]]) -> None:
        self._value = None if value is None else list(value)

    def _accepts(self, raw: Any) -> bool:
        return isinstance(raw, list) and all(isinstance(item, str) for item in raw)

    def _decode(self, raw: Any) -> List[str]:
        return list(raw)

    def _encode(self, value: List[str]) -> Any:
        return list(value)


class PersistentSettings:
    """Fixed, ordered collection of settings loaded and stored together."""

    def __init__(self, settings: Iterable[Setting]):
        self._settings: Tuple[Setting, ...] = tuple(settings)

        keys = [setting.key for setting in self._settings]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise ValueError(f"Duplicate setting keys: {', '.join(duplicates)}")

    def load(self, json_object: JsonObject) -> None:
        for setting in self._settings:
            setting.load(json_object)

    def store(self, json_object: JsonObject) -> None:
        for setting in self._settings:
            setting.store(json_object)

    def keys(self) -> List[str]:
        return [setting.key for setting in self._settings]

    def __iter__(self) -> Iterator[Setting]:
        return iter(self._settings)

    def __len__(self) -> int:
        return len(self._settings)
