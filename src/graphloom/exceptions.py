"""Custom exception classes for the graphloom library.

Two families are kept apart on purpose. ``PreconditionError`` signals a
programming error detected before any network activity (a missing argument
or an unset client property); it is never worth retrying. Everything else
(``ParseError``, ``APIError`` and the transport wrappers) describes an
outcome of a request that the caller may want to inspect and recover from.
"""

from typing import Any

import httpx


class GraphloomError(Exception):
    """Base exception class for all graphloom errors."""

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the base exception.

        Args:
            message: The error message.
            response: Optional httpx.Response object associated with the error.
            request: Optional httpx.Request object associated with the error.
        """
        super().__init__(message)
        self.message = message
        self.response = response
        self.request = request

    def __str__(self) -> str:
        if self.response is not None:
            url_info = getattr(getattr(self.response, "_request", None), "url", "N/A")
            return f"{self.message} (Status: {self.response.status_code}, URL: {url_info})"
        if isinstance(self.request, httpx.Request):
            return f"{self.message} (URL: {self.request.url})"
        return self.message


class PreconditionError(GraphloomError, ValueError):
    """A required argument is missing or empty.

    Raised synchronously, before any request is built or sent.
    """

    def __init__(self, message: str):
        super().__init__(message)


class PropertyNotSetError(PreconditionError):
    """A property required by an operation has not been set.

    Used both for client credentials (``client_id``, ``redirect_uri``, ...) and
    for required properties of an options object (``identifier``).
    """

    def __init__(self, property_name: str, message: str | None = None):
        self.property_name = property_name
        super().__init__(message or f"Property '{property_name}' must be set.")


class ConfigurationError(GraphloomError):
    """Represents an error in the library's configuration."""

    def __init__(self, message: str):
        super().__init__(message, response=None)


class ParseError(GraphloomError):
    """The response body could not be turned into the requested entity."""


class APIError(GraphloomError):
    """Represents an error returned by the Graph API.

    When the response carried the provider's ``error`` envelope, its fields are
    exposed as attributes. A 4xx/5xx response without an envelope produces an
    instance where those attributes are ``None``.

    Attributes:
        code: The numeric error code (e.g. ``190`` for an invalid token).
        error_type: The error type, e.g. ``OAuthException``.
        error_subcode: Optional numeric subcode.
        fbtrace_id: Trace identifier for support requests.
        error: The raw ``error`` object as received.
    """

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        error_type: str | None = None,
        error_subcode: int | None = None,
        fbtrace_id: str | None = None,
        error: dict[str, Any] | None = None,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        super().__init__(message, response=response, request=request)
        self.code = code
        self.error_type = error_type
        self.error_subcode = error_subcode
        self.fbtrace_id = fbtrace_id
        self.error = error or {}

    def __str__(self) -> str:
        base = super().__str__()
        if self.code is None:
            return base
        return f"[{self.error_type or 'Error'} #{self.code}] {base}"


class TimeoutError(GraphloomError):
    """Represents a request timeout error."""

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        super().__init__(message, request=request, response=None)


class NetworkError(GraphloomError):
    """Represents a network connection error (DNS failure, refused connection, ...)."""

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        super().__init__(message, request=request, response=None)


class GraphloomRequestError(GraphloomError):
    """Any other failure raised by the transport while sending a request."""
