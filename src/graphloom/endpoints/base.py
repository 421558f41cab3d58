# graphloom/endpoints/base.py
"""Base classes shared by the raw and typed endpoints.

A raw endpoint turns a method call into an options object, validates the
identifier it was given and hands the request to
:class:`~graphloom.oauth.GraphOAuthClient`, returning the ``httpx.Response``
as is. A typed endpoint wraps a raw endpoint and runs the response through
:meth:`GraphResponse.parse_response`.
"""

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from ..exceptions import PreconditionError
from ..log_config import logger
from ..options import GraphOptions
from ..responses import GraphResponse

if TYPE_CHECKING:
    from ..oauth import GraphOAuthClient

OptionsT = TypeVar("OptionsT", bound=GraphOptions)
T = TypeVar("T")


class BaseRawEndpoint:
    """Base class for raw endpoints.

    Attributes:
        client: The `GraphOAuthClient` used to decorate and send requests.
    """

    def __init__(self, client: "GraphOAuthClient"):
        self._client = client
        logger.debug(f"{self.__class__.__name__} initialized")

    @property
    def client(self) -> "GraphOAuthClient":
        return self._client

    def _resolve_options(
        self,
        identifier: "str | OptionsT | None",
        options_cls: type[OptionsT],
        **kwargs: Any,
    ) -> OptionsT:
        """Return ``identifier`` if it already is an options object, else build one.

        Keyword arguments left as None are not passed on, so the options'
        own defaults apply.

        Raises:
            PreconditionError: If ``identifier`` is None or blank.
            TypeError: If ``identifier`` is an options object of another class,
                or is combined with keyword arguments.
        """
        values = {name: value for name, value in kwargs.items() if value is not None}
        if isinstance(identifier, GraphOptions):
            if not isinstance(identifier, options_cls):
                raise TypeError(
                    f"Expected {options_cls.__name__}, got {type(identifier).__name__}"
                )
            if values:
                raise TypeError(
                    f"Set {', '.join(sorted(values))} on the {options_cls.__name__} "
                    "object instead of passing them alongside it"
                )
            return identifier
        if identifier is None or not str(identifier).strip():
            raise PreconditionError("A Graph API identifier (ID or alias) must be specified.")
        return options_cls(identifier=identifier, **values)

    def _send(self, options: GraphOptions) -> httpx.Response:
        return self._client.do_request(options)


class BaseEndpoint:
    """Base class for typed endpoints returning parsed entities."""

    def __init__(self, raw: BaseRawEndpoint):
        self._raw = raw

    @property
    def raw(self) -> BaseRawEndpoint:
        return self._raw

    @staticmethod
    def _wrap(
        response: httpx.Response, parser: Callable[[Mapping[str, Any]], T | None]
    ) -> GraphResponse[T]:
        return GraphResponse.parse_response(response, parser)  # type: ignore[return-value]
