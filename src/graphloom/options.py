# graphloom/options.py
"""Per-call option objects.

Each options class describes one call shape of the Graph API and knows how
to turn itself into a :class:`~graphloom.types.GraphRequest`. Required
properties (typically ``identifier``) may be left unset while an options
object is being built; they are only checked by :meth:`GraphOptions.to_request`,
which raises :class:`~graphloom.exceptions.PropertyNotSetError` naming the
missing property.

Optional parameters end up in the query or body only when they were set:
an unset ``limit`` is absent from the request, never ``limit=``.
"""

from pathlib import Path
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import PreconditionError, PropertyNotSetError
from .fields import GraphField, GraphFieldsCollection
from .types import GraphRequest


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class GraphOptions(BaseModel):
    """Base class for all options.

    Subclasses declare their HTTP method, the properties that must be set,
    and override :meth:`get_path`, :meth:`get_query` and :meth:`get_body`.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    http_method: ClassVar[str] = "GET"
    required_properties: ClassVar[dict[str, str]] = {}
    """Property name mapped to the message used when it is missing."""

    def validate_required(self) -> None:
        """Raise PropertyNotSetError for the first required property left unset."""
        for name, message in self.required_properties.items():
            if _is_blank(getattr(self, name)):
                raise PropertyNotSetError(name, message)

    def get_path(self) -> str:
        raise NotImplementedError

    def get_query(self) -> dict[str, str]:
        return {}

    def get_body(self) -> dict[str, str] | None:
        return None

    def get_files(self) -> dict[str, Any] | None:
        return None

    def to_request(self) -> GraphRequest:
        """Validate the options and build the (undecorated) request."""
        self.validate_required()
        return GraphRequest(
            method=self.http_method,
            url=self.get_path(),
            params=self.get_query(),
            data=self.get_body(),
            files=self.get_files(),
        )


class FieldsMixin(BaseModel):
    """Adds the ``fields`` parameter to read options."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    fields: GraphFieldsCollection | None = None

    @field_validator("fields", mode="before")
    @classmethod
    def coerce_fields(cls, v: Any) -> GraphFieldsCollection | None:
        if v is None or isinstance(v, GraphFieldsCollection):
            return v
        if isinstance(v, GraphField | str):
            return GraphFieldsCollection(v)
        if isinstance(v, list | tuple | set | frozenset):
            return GraphFieldsCollection(*v)
        raise ValueError(f"Unsupported value for fields: {type(v).__name__}")

    def _fields_query(self) -> dict[str, str]:
        if self.fields:
            return {"fields": str(self.fields)}
        return {}


class GetObjectOptions(FieldsMixin, GraphOptions):
    """Options for getting a single object by its identifier."""

    required_properties = {"identifier": "A Graph API identifier (ID) must be specified."}

    identifier: str | None = None

    def get_path(self) -> str:
        return f"/{self.identifier}"

    def get_query(self) -> dict[str, str]:
        return self._fields_query()


class GetPostOptions(GetObjectOptions):
    pass


class GetPhotoOptions(GetObjectOptions):
    pass


class GetUserOptions(GetObjectOptions):
    required_properties = {
        "identifier": "A Graph API identifier (ID or alias) must be specified."
    }


class GetEdgeOptions(FieldsMixin, GraphOptions):
    """Options for listing an edge (connection) of an object, e.g. ``/{id}/photos``.

    Attributes:
        identifier: ID or alias of the parent object.
        limit: Maximum number of items per page.
        after: Cursor pointing to the last item of the previous page.
    """

    edge: ClassVar[str] = ""
    required_properties = {
        "identifier": "A Graph API identifier (ID or alias) must be specified."
    }

    identifier: str | None = None
    limit: int | None = Field(default=None, ge=1)
    after: str | None = None

    def get_path(self) -> str:
        return f"/{self.identifier}/{self.edge}"

    def get_query(self) -> dict[str, str]:
        query = self._fields_query()
        if self.limit is not None:
            query["limit"] = str(self.limit)
        if not _is_blank(self.after):
            query["after"] = self.after  # type: ignore[assignment]
        return query


class GetPhotosOptions(GetEdgeOptions):
    edge = "photos"


class GetPostsOptions(GetEdgeOptions):
    """Posts published by the object itself. See GetFeedOptions for the whole feed."""

    edge = "posts"


class GetFeedOptions(GetEdgeOptions):
    edge = "feed"


class GetLikesOptions(GetEdgeOptions):
    """Options for ``/{id}/likes``.

    Attributes:
        summary: Ask for the ``summary`` block with the total count.
    """

    edge = "likes"

    summary: bool | None = None

    def get_query(self) -> dict[str, str]:
        query = super().get_query()
        if self.summary is not None:
            query["summary"] = "true" if self.summary else "false"
        return query


class GetCommentsOptions(GetLikesOptions):
    """Options for ``/{id}/comments``.

    Attributes:
        order: ``chronological`` or ``reverse_chronological``.
        filter: ``toplevel`` or ``stream`` (include replies).
    """

    edge = "comments"

    order: str | None = None
    filter: str | None = None

    def get_query(self) -> dict[str, str]:
        query = super().get_query()
        if not _is_blank(self.order):
            query["order"] = self.order  # type: ignore[assignment]
        if not _is_blank(self.filter):
            query["filter"] = self.filter  # type: ignore[assignment]
        return query


class PostPhotoOptions(GraphOptions):
    """Options for uploading a photo to a user, page or album.

    Either ``url`` (a photo the API downloads itself) or ``source`` (the image
    bytes, or a path to read them from) must be set.
    """

    http_method = "POST"
    required_properties = {
        "identifier": "A Graph API identifier (ID or alias) must be specified."
    }

    identifier: str | None = None
    url: str | None = None
    source: bytes | Path | None = None
    filename: str | None = None
    message: str | None = None
    place: str | None = None
    published: bool | None = None
    no_story: bool | None = None

    @field_validator("source", mode="before")
    @classmethod
    def str_source_is_path(cls, v: Any) -> Any:
        # A str is a file name; only bytes are image content
        if isinstance(v, str):
            return Path(v)
        return v

    def validate_required(self) -> None:
        super().validate_required()
        if _is_blank(self.url) and self.source is None:
            raise PropertyNotSetError("url", "Either a URL or a source file must be specified.")
        if self.url and self.source is not None:
            raise PreconditionError("Specify either a URL or a source file, not both.")

    def get_path(self) -> str:
        return f"/{self.identifier}/photos"

    def get_body(self) -> dict[str, str]:
        body: dict[str, str] = {}
        if not _is_blank(self.url):
            body["url"] = self.url  # type: ignore[assignment]
        if not _is_blank(self.message):
            body["message"] = self.message  # type: ignore[assignment]
        if not _is_blank(self.place):
            body["place"] = self.place  # type: ignore[assignment]
        if self.published is not None:
            body["published"] = "true" if self.published else "false"
        if self.no_story is not None:
            body["no_story"] = "true" if self.no_story else "false"
        return body

    def get_files(self) -> dict[str, Any] | None:
        if self.source is None:
            return None
        if isinstance(self.source, Path):
            return {"source": (self.filename or self.source.name, self.source.read_bytes())}
        return {"source": (self.filename or "photo.jpg", self.source)}


class PostStatusMessageOptions(GraphOptions):
    """Options for publishing a status message or link to ``/{id}/feed``."""

    http_method = "POST"
    required_properties = {
        "identifier": "A Graph API identifier (ID or alias) must be specified."
    }

    identifier: str | None = None
    message: str | None = None
    link: str | None = None
    place: str | None = None

    def validate_required(self) -> None:
        super().validate_required()
        if _is_blank(self.message) and _is_blank(self.link):
            raise PropertyNotSetError("message", "Either a message or a link must be specified.")

    def get_path(self) -> str:
        return f"/{self.identifier}/feed"

    def get_body(self) -> dict[str, str]:
        body: dict[str, str] = {}
        for name in ("message", "link", "place"):
            value = getattr(self, name)
            if not _is_blank(value):
                body[name] = value
        return body


class PostCommentOptions(GraphOptions):
    """Options for commenting on a post, photo or comment."""

    http_method = "POST"
    required_properties = {
        "identifier": "A Graph API identifier (ID) must be specified.",
        "message": "A message must be specified.",
    }

    identifier: str | None = None
    message: str | None = None

    def get_path(self) -> str:
        return f"/{self.identifier}/comments"

    def get_body(self) -> dict[str, str]:
        return {"message": self.message}  # type: ignore[dict-item]
