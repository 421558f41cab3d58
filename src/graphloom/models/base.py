"""Base model for Graph API entities.

Every entity is a frozen Pydantic model created by its own ``parse``
classmethod, which reads the payload through :class:`FieldPresenceJson`.
Besides the typed field values, each instance remembers which of its fields
were present as keys in the source payload. This is what ``has_<field>``
answers, independently of the resolved value: ``{"message": null}`` gives
``message=None`` and ``has_message=True``, while ``{}`` gives
``message=None`` and ``has_message=False``.

Parsing rules:
    * ``parse(None)`` returns ``None``.
    * A payload that is not a JSON object raises :class:`ParseError`.
    * A missing required identifier raises :class:`ParseError`.
    * Nested optional objects that fail to parse become ``None`` (see
      :meth:`FieldPresenceJson.get_object`).
"""

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..exceptions import ParseError
from ..presence import FieldPresenceJson

_INTERNAL_FIELDS = frozenset({"present_fields"})


class GraphObject(BaseModel):
    """Base class for all parsed Graph API entities.

    Attributes:
        present_fields: Names of the model fields whose JSON key was present.
        raw_json: Read-only view of the JSON object the entity was parsed
            from, including keys graphloom has no field for.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    present_fields: frozenset[str] = Field(default_factory=frozenset, repr=False, exclude=True)
    _raw_json: dict[str, Any] = PrivateAttr(default_factory=dict)

    required_fields: ClassVar[tuple[str, ...]] = ()
    """JSON keys that must hold a non-empty string for the payload to parse."""

    @classmethod
    def parse(cls, obj: Mapping[str, Any] | None) -> Self | None:
        """Parse ``obj`` into an instance, or return None if ``obj`` is None.

        Raises:
            ParseError: If ``obj`` is not a JSON object or lacks a required key.
        """
        if obj is None:
            return None
        json = FieldPresenceJson(obj)
        for key in cls.required_fields:
            if not json.get_string(key):
                raise ParseError(f"{cls.__name__} requires a non-empty '{key}'")
        return cls.from_json(json)

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> Self:
        """Build an instance from a wrapped payload. Implemented per entity."""
        raise NotImplementedError

    @classmethod
    def _create(cls, json: FieldPresenceJson, **values: Any) -> Self:
        present = frozenset(
            name
            for name, info in cls.model_fields.items()
            if name not in _INTERNAL_FIELDS and json.has_key(info.alias or name)
        )
        instance = cls(present_fields=present, **values)
        instance._raw_json = copy.deepcopy(dict(json.raw))
        return instance

    @property
    def raw_json(self) -> Mapping[str, Any]:
        return MappingProxyType(self._raw_json)

    @classmethod
    def entity_fields(cls) -> list[str]:
        return [name for name in cls.model_fields if name not in _INTERNAL_FIELDS]

    def has(self, field: str) -> bool:
        """Whether the JSON key backing ``field`` was present in the payload.

        ``field`` may be the attribute name (``from_``) or the JSON key (``from``).
        """
        name = self._resolve_field(field)
        if name is None:
            raise AttributeError(f"{type(self).__name__} has no field '{field}'")
        return name in self.present_fields

    @property
    def presence(self) -> dict[str, bool]:
        """Mapping of every entity field to its presence flag."""
        return {name: name in self.present_fields for name in self.entity_fields()}

    @classmethod
    def _resolve_field(cls, field: str) -> str | None:
        fields = cls.model_fields
        if field in fields and field not in _INTERNAL_FIELDS:
            return field
        for name, info in fields.items():
            if info.alias == field:
                return name
        if f"{field}_" in fields:
            return f"{field}_"
        return None

    def __getattr__(self, item: str) -> Any:
        if item.startswith("has_"):
            name = type(self)._resolve_field(item[4:])
            if name is not None:
                return name in self.present_fields
        return super().__getattr__(item)  # type: ignore[misc]
