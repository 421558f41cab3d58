# graphloom/responses.py
"""Typed wrappers around raw Graph API responses.

:meth:`GraphResponse.parse_response` is the single place where a raw
``httpx.Response`` is checked for the provider's error envelope and, if
there is none, handed to an entity parser. Raw endpoints never call it; the
typed endpoints in :mod:`graphloom.endpoints` do.
"""

from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

import httpx

from .exceptions import APIError, ParseError
from .log_config import logger
from .models.results import GraphToken
from .presence import FieldPresenceJson

T = TypeVar("T")


def extract_api_error(payload: Any, response: httpx.Response | None = None) -> APIError | None:
    """Build an APIError from an ``{"error": ...}`` envelope, or return None.

    Handles both the Graph shape (``{"error": {"code": 190, "message": ...}}``)
    and the plain OAuth 2.0 shape (``{"error": "invalid_request",
    "error_description": ...}``).
    """
    if not isinstance(payload, Mapping) or "error" not in payload:
        return None
    error = payload["error"]
    if isinstance(error, Mapping):
        json = FieldPresenceJson(error)
        return APIError(
            json.get_string("message") or "Unknown Graph API error",
            code=json.get_int("code") if json.has_key("code") else None,
            error_type=json.get_string("type"),
            error_subcode=json.get_int("error_subcode") if json.has_key("error_subcode") else None,
            fbtrace_id=json.get_string("fbtrace_id"),
            error=dict(error),
            response=response,
        )
    if isinstance(error, str):
        description = payload.get("error_description")
        return APIError(
            description if isinstance(description, str) and description else error,
            error_type=error,
            error={"type": error, "message": description},
            response=response,
        )
    return None


class GraphResponse(Generic[T]):
    """A raw response paired with the entity parsed from its body.

    Attributes:
        response: The raw ``httpx.Response``, kept for diagnostics.
        body: The parsed entity.
    """

    __slots__ = ("_response", "_body")

    def __init__(self, response: httpx.Response, body: T):
        self._response = response
        self._body = body

    @property
    def response(self) -> httpx.Response:
        return self._response

    @property
    def body(self) -> T:
        return self._body

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code}, body={self._body!r})"

    @staticmethod
    def validate_response(response: httpx.Response) -> Mapping[str, Any]:
        """Check ``response`` for errors and return its decoded JSON object.

        Raises:
            APIError: If the body is an error envelope, or the status is 4xx/5xx.
            ParseError: If the body is not a JSON object.
        """
        try:
            payload = response.json()
        except ValueError:
            payload = None

        error = extract_api_error(payload, response)
        if error is not None:
            logger.error(
                f"Graph API error {error.code} ({error.error_type}): {error.message}"
            )
            raise error

        if response.status_code >= httpx.codes.BAD_REQUEST:
            logger.error(f"Graph API request failed with status {response.status_code}")
            raise APIError(
                f"API request failed with status {response.status_code}",
                response=response,
            )

        if not isinstance(payload, Mapping):
            raise ParseError("Response body is not a JSON object", response=response)
        return payload

    @classmethod
    def parse_response(
        cls,
        response: httpx.Response | None,
        parser: Callable[[Mapping[str, Any]], T | None],
    ) -> "GraphResponse[T] | None":
        """Validate ``response`` and parse its body with ``parser``.

        Returns None when ``response`` is None.
        """
        if response is None:
            return None
        payload = cls.validate_response(response)
        try:
            body = parser(payload)
        except ParseError as e:
            raise ParseError(e.message, response=response) from e
        if body is None:
            raise ParseError("Response body could not be parsed", response=response)
        return cls(response, body)


class GraphTokenResponse(GraphResponse[GraphToken]):
    """Response of the ``/oauth/access_token`` endpoint.

    Besides JSON, accepts the form-encoded body older API versions return.
    """

    @classmethod
    def parse_token_response(cls, response: httpx.Response | None) -> "GraphTokenResponse | None":
        if response is None:
            return None
        content_type = response.headers.get("content-type", "")
        if (
            response.status_code < httpx.codes.BAD_REQUEST
            and "json" not in content_type
            and response.text.lstrip().startswith("access_token=")
        ):
            token = GraphToken.parse_form(response.text)
            if token is None:
                raise ParseError("Token response could not be parsed", response=response)
            return cls(response, token)
        return cls.parse_response(response, GraphToken.parse)  # type: ignore[return-value]
