# graphloom/presence.py
"""Safe, presence-aware access to decoded JSON objects.

The Graph API only returns the fields that were asked for (and sometimes not
even those), so every model reads its payload through :class:`FieldPresenceJson`.
Getters never raise for a missing or malformed value; they fall back to a
type-appropriate default. Whether a key existed at all is answered separately
by :meth:`FieldPresenceJson.has_key`, which is what entity presence flags are
built from.
"""

from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Any, TypeVar

from .exceptions import ParseError
from .log_config import logger

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

_GRAPH_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def parse_graph_datetime(value: str) -> datetime | None:
    """Parse a Graph API timestamp such as ``2017-05-01T12:00:00+0000``.

    Falls back to ISO 8601 parsing for other formats. A value without an
    offset is taken as UTC, so every result is timezone-aware. Returns
    ``None`` if the value cannot be parsed.
    """
    try:
        return datetime.strptime(value, _GRAPH_DATETIME_FORMAT)
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class FieldPresenceJson:
    """Typed, non-raising accessor over a JSON object.

    Args:
        obj: The decoded JSON object. Anything that is not a mapping is
            rejected with a :class:`ParseError`.
    """

    def __init__(self, obj: Mapping[str, Any]):
        if not isinstance(obj, Mapping):
            raise ParseError(f"Expected a JSON object, got {type(obj).__name__}")
        self._obj = obj

    @property
    def raw(self) -> Mapping[str, Any]:
        """The wrapped JSON object."""
        return self._obj

    def has_key(self, key: str) -> bool:
        """Return True if ``key`` exists in the object, whatever its value."""
        return key in self._obj

    def keys(self) -> frozenset[str]:
        return frozenset(self._obj.keys())

    def get(self, key: str, default: Any = None) -> Any:
        """Return the raw value of ``key``, or ``default`` when absent or null."""
        value = self._obj.get(key)
        return default if value is None else value

    def get_string(self, key: str, default: str | None = None) -> str | None:
        value = self._obj.get(key)
        if isinstance(value, str):
            return value
        # Identifiers occasionally arrive as bare numbers
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._obj.get(key)
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("true", "false"):
            return value.lower() == "true"
        return default

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._obj.get(key)
        if isinstance(value, bool):
            return default
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return default
        return default

    def get_float(self, key: str, default: float = 0.0) -> float:
        value = self._obj.get(key)
        if isinstance(value, bool):
            return default
        if isinstance(value, int | float):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value.strip())
            except ValueError:
                return default
        return default

    def get_enum(self, key: str, enum_cls: type[E], default: E) -> E:
        """Return the member of ``enum_cls`` whose value matches ``key``.

        Matching is exact first, then case-insensitive. Unknown values resolve
        to ``default`` so that new upstream values do not break parsing.
        """
        value = self._obj.get(key)
        if not isinstance(value, str):
            return default
        try:
            return enum_cls(value)
        except ValueError:
            pass
        lowered = value.lower()
        for member in enum_cls:
            if isinstance(member.value, str) and member.value.lower() == lowered:
                return member
        logger.debug(f"Unknown {enum_cls.__name__} value '{value}' for key '{key}'")
        return default

    def get_datetime(self, key: str) -> datetime | None:
        value = self._obj.get(key)
        if not isinstance(value, str):
            return None
        return parse_graph_datetime(value)

    def get_object(
        self, key: str, parser: Callable[[Mapping[str, Any]], T | None]
    ) -> T | None:
        """Parse the nested object at ``key`` with ``parser``.

        Returns ``None`` when the key is absent, not an object, or when the
        sub-parser rejects it.
        """
        value = self._obj.get(key)
        if not isinstance(value, Mapping):
            return None
        try:
            return parser(value)
        except ParseError as e:
            logger.warning(f"Dropping malformed nested object '{key}': {e}")
            return None

    def get_array(
        self, key: str, parser: Callable[[Mapping[str, Any]], T | None]
    ) -> list[T]:
        """Parse every object of the array at ``key`` with ``parser``.

        Always returns a list. Items the sub-parser rejects are skipped.
        """
        value = self._obj.get(key)
        if not isinstance(value, list):
            return []
        items: list[T] = []
        for index, item in enumerate(value):
            if not isinstance(item, Mapping):
                logger.warning(f"Skipping non-object item {index} of array '{key}'")
                continue
            try:
                parsed = parser(item)
            except ParseError as e:
                logger.warning(f"Skipping malformed item {index} of array '{key}': {e}")
                continue
            if parsed is not None:
                items.append(parsed)
        return items

    def get_string_array(self, key: str) -> list[str]:
        value = self._obj.get(key)
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, str)]
