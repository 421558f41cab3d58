# graphloom/tokens.py
"""Named tokens, ordered token collections and token registries.

Fields (``fields=id,message``) and OAuth scopes (``scope=email,user_posts``)
share the same mechanics: a named value, an ordered set of such values that
serializes to one comma-separated query parameter, and a lookup table of the
values the library knows about. The concrete classes live in
:mod:`graphloom.fields` and :mod:`graphloom.scopes`.
"""

from collections.abc import Iterable, Iterator
from typing import Any, ClassVar, Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

from .exceptions import ConfigurationError, PreconditionError
from .log_config import logger


class NamedToken(BaseModel):
    """A named, immutable value such as a field or a scope.

    Attributes:
        name: The case-sensitive name sent over the wire.
        description: Optional human readable description.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None

    def __init__(self, name: str, description: str | None = None, **data: Any):
        super().__init__(name=name, description=description, **data)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("A token name must be a non-empty string")
        return v.strip()

    @field_validator("description")
    @classmethod
    def blank_description_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()

    def __str__(self) -> str:
        return self.name

    @classmethod
    def collection_class(cls) -> type["TokenCollection"]:
        return TokenCollection

    def union(self, *others: "NamedToken | str | Iterable[NamedToken | str]") -> "TokenCollection":
        """Combine this token with ``others`` into a collection."""
        return self.collection_class()(self, *others)


TokenT = TypeVar("TokenT", bound=NamedToken)


class TokenCollection(Generic[TokenT]):
    """An immutable, ordered set of unique tokens.

    Items may be given as tokens, as names (accepted as opaque tokens, never
    validated), or as iterables of either. A single string is split on commas.
    ``add`` and ``union`` return new collections; the receiver is unchanged.
    """

    token_class: ClassVar[type[NamedToken]] = NamedToken

    def __init__(self, *items: "TokenT | str | Iterable[TokenT | str]"):
        tokens: dict[str, TokenT] = {}
        for token in self._flatten(items):
            tokens.setdefault(token.name, token)
        self._tokens: tuple[TokenT, ...] = tuple(tokens.values())

    @classmethod
    def _flatten(cls, items: Iterable[Any]) -> Iterator[TokenT]:
        for item in items:
            if item is None:
                continue
            if isinstance(item, NamedToken):
                yield item  # type: ignore[misc]
            elif isinstance(item, str):
                for name in item.split(","):
                    if name.strip():
                        yield cls.token_class(name.strip())  # type: ignore[misc]
            elif isinstance(item, Iterable):
                yield from cls._flatten(item)
            else:
                raise PreconditionError(
                    f"Cannot add {type(item).__name__} to {cls.__name__}"
                )

    @classmethod
    def parse(
        cls, value: str | Iterable[str] | None, registry: "TokenRegistry[TokenT] | None" = None
    ) -> Self:
        """Build a collection from names, resolving known names via ``registry``.

        Names the registry does not know are kept as plain tokens.
        """
        if value is None:
            return cls()
        names = value.split(",") if isinstance(value, str) else list(value)
        resolved: list[TokenT | str] = []
        for name in (n.strip() for n in names):
            if not name:
                continue
            known = registry.get(name) if registry is not None else None
            resolved.append(known if known is not None else name)
        return cls(*resolved)

    def add(self, *items: "TokenT | str | Iterable[TokenT | str]") -> Self:
        """Return a new collection with ``items`` appended."""
        return type(self)(self._tokens, *items)

    def union(self, other: "TokenCollection[TokenT] | Iterable[TokenT | str]") -> Self:
        """Return a new collection holding the tokens of both collections."""
        return type(self)(self._tokens, other)

    @property
    def names(self) -> list[str]:
        return [token.name for token in self._tokens]

    def __iter__(self) -> Iterator[TokenT]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __bool__(self) -> bool:
        return bool(self._tokens)

    def __contains__(self, item: object) -> bool:
        name = item.name if isinstance(item, NamedToken) else item
        return any(token.name == name for token in self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenCollection):
            return NotImplemented
        return self.names == other.names

    def __hash__(self) -> int:
        return hash(tuple(self.names))

    def __str__(self) -> str:
        return ",".join(self.names)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class TokenRegistry(Generic[TokenT]):
    """Name to token lookup, append-only until frozen.

    A registry is built once (typically at startup, see
    :func:`graphloom.scopes.default_scope_registry`), frozen, and then shared
    read-only, which keeps lookups safe across threads without locking.
    Lookups are advisory: unknown names yield ``None``, never an error.
    """

    def __init__(self, tokens: Iterable[TokenT] = ()):
        self._tokens: dict[str, TokenT] = {}
        self._frozen = False
        for token in tokens:
            self.register(token)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, token: TokenT) -> TokenT:
        if self._frozen:
            raise ConfigurationError(
                f"Cannot register '{token.name}': the registry is read-only."
            )
        if token.name in self._tokens:
            raise ConfigurationError(f"A token named '{token.name}' is already registered.")
        self._tokens[token.name] = token
        return token

    def freeze(self) -> Self:
        self._frozen = True
        logger.debug(f"{type(self).__name__} frozen with {len(self._tokens)} tokens")
        return self

    def get(self, name: str) -> TokenT | None:
        """Return the token registered under ``name``, or None if unknown."""
        return self._tokens.get(name)

    def exists(self, name: str) -> bool:
        return name in self._tokens

    def __contains__(self, name: object) -> bool:
        return name in self._tokens

    def __iter__(self) -> Iterator[TokenT]:
        return iter(self._tokens.values())

    def __len__(self) -> int:
        return len(self._tokens)
