# graphloom/types.py
"""Core type definitions for graphloom.

This module defines the request description passed between the options
builders, the OAuth client and the transport, together with the type aliases
for request hooks.
"""

from collections.abc import Callable
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

from .constants import SENSITIVE_PARAMS


class GraphRequest(BaseModel):
    """Encapsulates everything needed to send one Graph API call.

    ``url`` starts out as a bare path such as ``/123/photos`` and becomes an
    absolute URL once the OAuth client has decorated the request. Reads carry
    their parameters in ``params``; writes put the payload in ``data`` (form
    fields) and ``files`` (multipart uploads).
    """

    method: str = "GET"
    url: str
    params: dict[str, str] = Field(default_factory=dict)
    data: dict[str, str] | None = None
    files: dict[str, Any] | None = None
    headers: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    @property
    def is_absolute(self) -> bool:
        """Whether ``url`` already carries a scheme and host.

        Only the URL itself counts; a URL inside the query string does not.
        """
        return bool(httpx.URL(self.url).scheme)

    def has_param(self, name: str) -> bool:
        """Whether ``name`` is set in ``params`` or in the query part of ``url``."""
        if name in self.params:
            return True
        return name in httpx.URL(self.url).params

    def build_request(self, client: httpx.Client | None = None) -> httpx.Request:
        """Builds an httpx.Request object from the stored data.

        When ``client`` is given, its default headers and timeout are applied.
        """
        kwargs: dict[str, Any] = {
            "method": self.method,
            "url": self.url,
            "params": self.params or None,
            "data": self.data,
            "files": self.files,
            "headers": self.headers,
        }
        if client is not None:
            return client.build_request(**kwargs)
        return httpx.Request(**kwargs)

    def masked_url(self) -> str:
        """The request URL with its parameters, secrets replaced for logging."""
        url = httpx.URL(self.url)
        merged = dict(url.params)
        merged.update(self.params)
        masked = {k: ("***" if k in SENSITIVE_PARAMS else v) for k, v in merged.items()}
        return str(url.copy_with(params=masked)) if masked else str(url)


PreRequestHook = Callable[[str, str, dict[str, Any], httpx.Headers], None]
"""Type alias for a pre-request hook.

Pre-request hooks are functions called after a request has been decorated and
right before it is sent.

Args:
    method (str): The HTTP method of the request (e.g., "GET", "POST").
    url (str): The absolute URL of the request, without query parameters.
    params (dict[str, Any]): A mutable dictionary of query parameters.
        Hooks can modify this dictionary in place.
    headers (httpx.Headers): A mutable `httpx.Headers` object. Hooks can
        modify this object in place.
Return:
    None: Hooks are expected to modify arguments in-place or perform side effects.
"""

PostRequestHook = Callable[[httpx.Response], None]
"""Type alias for a post-request hook.

Post-request hooks receive the raw `httpx.Response` of every dispatched
request, before any error inspection or parsing happens.
"""
