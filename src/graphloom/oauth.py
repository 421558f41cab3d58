# graphloom/oauth.py
"""OAuth 2.0 handling and raw communication with the Graph API.

:class:`GraphOAuthClient` owns the app credentials, the access token and the
API version, performs the token operations of the login flow, and decorates
every outbound request (base URL, version, ``access_token``, ``locale``)
before dispatching it over ``httpx``.

There is no global "authenticated" state. Every operation checks the
properties it needs when it is called and raises
:class:`~graphloom.exceptions.PropertyNotSetError` if one is missing.

The credential attributes are plain mutable attributes. A client may be
shared between threads as long as nobody changes ``access_token``,
``locale`` etc. while calls are in flight.
"""

import ssl
from collections.abc import Iterable
from typing import Any, Self
from urllib.parse import urlencode

import certifi
import httpx

from .config import GraphSettings, get_settings
from .constants import (
    GRAPH_API_BASE_URL,
    OAUTH_ACCESS_TOKEN_PATH,
    OAUTH_DIALOG_PATH,
    WWW_BASE_URL,
)
from .endpoints.comments import CommentsRawEndpoint
from .endpoints.likes import LikesRawEndpoint
from .endpoints.photos import PhotosRawEndpoint
from .endpoints.posts import PostsRawEndpoint
from .endpoints.users import UsersRawEndpoint
from .exceptions import (
    GraphloomRequestError,
    NetworkError,
    PreconditionError,
    PropertyNotSetError,
    TimeoutError,
)
from .log_config import logger
from .options import GraphOptions
from .responses import GraphTokenResponse
from .scopes import GraphScope, GraphScopeCollection
from .types import GraphRequest


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class GraphOAuthClient:
    """Client for OAuth 2.0 and raw requests against the Graph API.

    Credentials given as arguments take precedence over those found in
    ``settings`` (which default to :func:`graphloom.config.get_settings`).

    Typical usage:
    ```python
    with GraphOAuthClient(client_id="...", client_secret="...", redirect_uri="...") as client:
        url = client.get_authorization_url("some-state", GraphScopes.EMAIL.union(GraphScopes.USER_POSTS))
        ...
        token = client.get_access_token_from_auth_code(code).body
        client.access_token = token.access_token
        raw = client.photos.get_photos("me", limit=10)
    ```

    Attributes:
        client_id: App ID.
        client_secret: App secret.
        redirect_uri: Redirect URI registered for the app.
        access_token: Token appended to every request that does not carry one.
        version: API version segment, e.g. ``v2.9``.
        locale: Locale appended to every request that does not carry one.
        photos, posts, likes, comments, users: Raw endpoints bound to this client.
    """

    def __init__(
        self,
        settings: GraphSettings | None = None,
        *,
        client_id: str | None = None,
        client_secret: str | None = None,
        redirect_uri: str | None = None,
        access_token: str | None = None,
        version: str | None = None,
        locale: str | None = None,
        http_client: httpx.Client | None = None,
    ):
        self._settings = settings or get_settings()

        self.client_id = client_id if client_id is not None else self._settings.client_id
        self.client_secret = (
            client_secret if client_secret is not None else self._settings.client_secret
        )
        self.redirect_uri = (
            redirect_uri if redirect_uri is not None else self._settings.redirect_uri
        )
        self.access_token = (
            access_token if access_token is not None else self._settings.access_token
        )
        self.version = version if version is not None else self._settings.api_version
        self.locale = locale if locale is not None else self._settings.locale

        self._should_close_client = http_client is None  # Close only if we created it
        self._http_client = http_client or self._create_default_http_client()

        self.photos = PhotosRawEndpoint(self)
        self.posts = PostsRawEndpoint(self)
        self.likes = LikesRawEndpoint(self)
        self.comments = CommentsRawEndpoint(self)
        self.users = UsersRawEndpoint(self)

        logger.debug(
            f"GraphOAuthClient initialized (version={self.version}, "
            f"client_id={self.client_id}, has_token={not _is_blank(self.access_token)})"
        )

    @classmethod
    def from_access_token(cls, access_token: str, **kwargs: Any) -> Self:
        """Create a client that authenticates every call with ``access_token``."""
        if _is_blank(access_token):
            raise PreconditionError("An access token must be specified.")
        return cls(access_token=access_token, **kwargs)

    @classmethod
    def from_app(
        cls,
        client_id: str,
        client_secret: str,
        redirect_uri: str | None = None,
        **kwargs: Any,
    ) -> Self:
        """Create a client for an app, optionally set up for the login flow."""
        if _is_blank(client_id):
            raise PreconditionError("A client ID must be specified.")
        if _is_blank(client_secret):
            raise PreconditionError("A client secret must be specified.")
        if redirect_uri is not None and _is_blank(redirect_uri):
            raise PreconditionError("The redirect URI must not be empty.")
        return cls(
            client_id=client_id, client_secret=client_secret, redirect_uri=redirect_uri, **kwargs
        )

    def _create_default_http_client(self) -> httpx.Client:
        """Create a default httpx.Client with configured settings.

        Returns:
            httpx.Client: Configured HTTP client with SSL verification,
                timeout settings, and user agent header.
        """
        try:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            verify_ssl: ssl.SSLContext | bool = ssl_context
            logger.debug("Using certifi SSL context.")
        except (OSError, ssl.SSLError):
            verify_ssl = True
            logger.warning("certifi bundle failed to load. Using default SSL verification.")

        return httpx.Client(
            timeout=self._settings.request_timeout,
            verify=verify_ssl,
            headers={"User-Agent": self._settings.user_agent},
        )

    def _require(self, *names: str) -> None:
        for name in names:
            if _is_blank(getattr(self, name)):
                raise PropertyNotSetError(name)

    # --- OAuth 2.0 ---

    def get_authorization_url(
        self,
        state: str,
        scope: GraphScopeCollection | GraphScope | str | Iterable[GraphScope | str] | None = None,
    ) -> str:
        """Build the URL of the login dialog the user should be redirected to.

        Args:
            state: Anti-forgery value echoed back to the redirect URI. Required.
            scope: Permissions to request, as a collection, a single scope, a
                comma-separated string or an iterable of names/scopes.
                The ``scope`` parameter is left out of the URL when no scope
                is given, so the dialog asks for the default permissions only.

        Raises:
            PropertyNotSetError: If ``version``, ``client_id`` or
                ``redirect_uri`` is not set.
            PreconditionError: If ``state`` is empty.
        """
        self._require("version", "client_id", "redirect_uri")
        if _is_blank(state):
            raise PreconditionError(
                "A valid state must be specified as it is part of the security of OAuth 2.0."
            )

        scopes = scope if isinstance(scope, GraphScopeCollection) else GraphScopeCollection(scope)
        query = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "state": state,
        }
        if scopes:
            query["scope"] = str(scopes)

        url = f"{WWW_BASE_URL}/{self.version}{OAUTH_DIALOG_PATH}?{urlencode(query, safe=',')}"
        logger.debug(f"Built authorization URL for client_id={self.client_id} scope='{scopes}'")
        return url

    def get_access_token_from_auth_code(self, code: str) -> GraphTokenResponse:
        """Exchange the ``code`` received on the redirect URI for a user access token.

        The returned token is not applied to this client.
        """
        self._require("version", "client_id", "client_secret", "redirect_uri")
        if _is_blank(code):
            raise PreconditionError("An authorization code must be specified.")
        logger.info("Exchanging authorization code for an access token")
        return self._token_request(
            {
                "client_id": self.client_id,
                "redirect_uri": self.redirect_uri,
                "client_secret": self.client_secret,
                "code": code,
            }
        )

    def renew_access_token(self, current_token: str) -> GraphTokenResponse:
        """Exchange ``current_token`` for a long-lived token.

        The returned token is not applied to this client; assign it to
        ``access_token`` if it should be used for subsequent calls.
        """
        self._require("version", "client_id", "client_secret")
        if _is_blank(current_token):
            raise PreconditionError("The current access token must be specified.")
        logger.info("Renewing access token")
        return self._token_request(
            {
                "grant_type": "fb_exchange_token",
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "fb_exchange_token": current_token,
            }
        )

    def get_app_access_token(self) -> GraphTokenResponse:
        """Get an app access token using the client credentials grant."""
        self._require("version", "client_id", "client_secret")
        logger.info(f"Requesting app access token for client_id={self.client_id}")
        return self._token_request(
            {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "grant_type": "client_credentials",
            }
        )

    def _token_request(self, params: dict[str, str]) -> GraphTokenResponse:
        request = GraphRequest(
            method="GET",
            url=f"{GRAPH_API_BASE_URL}/{self.version}{OAUTH_ACCESS_TOKEN_PATH}",
            params=params,
        )
        # Token calls authenticate with the app credentials, never with the held token
        response = self.send(request, decorate=False)
        return GraphTokenResponse.parse_token_response(response)  # type: ignore[return-value]

    # --- Requests ---

    def prepare_request(self, request: GraphRequest) -> GraphRequest:
        """Decorate ``request`` with base URL, version, access token and locale.

        Returns a decorated copy; ``request`` itself is left untouched.
        Applying this twice gives the same result as applying it once, and a
        caller-supplied ``access_token`` or ``locale`` is never replaced.

        Raises:
            PropertyNotSetError: If ``version`` is not set.
        """
        self._require("version")
        prepared = request.model_copy(deep=True)

        if not prepared.is_absolute:
            path = prepared.url if prepared.url.startswith("/") else f"/{prepared.url}"
            prepared.url = f"{GRAPH_API_BASE_URL}/{self.version}{path}"

        if not prepared.has_param("access_token") and not _is_blank(self.access_token):
            prepared.params["access_token"] = self.access_token  # type: ignore[assignment]

        if not prepared.has_param("locale") and not _is_blank(self.locale):
            prepared.params["locale"] = self.locale  # type: ignore[assignment]

        return prepared

    def do_get(
        self,
        path: str,
        options: GraphOptions | None = None,
        *,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send a GET request to ``path`` with the query of ``options`` and ``params``.

        The path of ``options`` is not used, but its required properties are
        still checked.

        Raises:
            PropertyNotSetError: If ``options`` lacks a required property.
        """
        if options is not None:
            options.validate_required()
        query = dict(options.get_query()) if options is not None else {}
        query.update(params or {})
        return self.send(GraphRequest(method="GET", url=path, params=query))

    def do_post(
        self,
        path: str,
        options: GraphOptions | None = None,
        *,
        data: dict[str, str] | None = None,
        files: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send a POST request to ``path`` with the body of ``options`` and ``data``.

        Like :meth:`do_get`, checks the required properties of ``options``.
        """
        if options is not None:
            options.validate_required()
        body = dict(options.get_body() or {}) if options is not None else {}
        body.update(data or {})
        upload = options.get_files() if options is not None else None
        if files:
            upload = {**(upload or {}), **files}
        return self.send(
            GraphRequest(
                method="POST",
                url=path,
                params=dict(options.get_query()) if options is not None else {},
                data=body or None,
                files=upload,
            )
        )

    def do_request(self, options: GraphOptions) -> httpx.Response:
        """Validate ``options`` and send the request they describe."""
        return self.send(options.to_request())

    def send(self, request: GraphRequest, *, decorate: bool = True) -> httpx.Response:
        """Dispatch ``request`` and return the raw response, whatever its status.

        Raises:
            TimeoutError: If the request times out.
            NetworkError: For network-related errors.
            GraphloomRequestError: For other transport errors.
        """
        if decorate:
            request = self.prepare_request(request)

        if self._settings.pre_request_hooks:
            hook_params: dict[str, Any] = dict(request.params)
            hook_headers = httpx.Headers(request.headers)
            logger.debug(
                f"Executing {len(self._settings.pre_request_hooks)} pre-request hooks "
                f"for {request.method} {request.masked_url()}"
            )
            for hook in self._settings.pre_request_hooks:
                try:
                    hook(request.method, request.url, hook_params, hook_headers)
                except Exception as e:
                    logger.error(
                        f"Error executing pre-request hook {getattr(hook, '__name__', str(hook))}: {e}"
                    )
            request = request.model_copy(
                update={
                    "params": {k: str(v) for k, v in hook_params.items()},
                    "headers": dict(hook_headers.items()),
                }
            )

        http_request = request.build_request(self._http_client)
        logger.debug(f"Sending request: {request.method} {request.masked_url()}")
        logger.trace(f"Request Headers: {http_request.headers}")

        try:
            response = self._http_client.send(http_request)
        except httpx.TimeoutException as e:
            logger.error(f"Request timed out: {request.masked_url()}")
            raise TimeoutError("Request timed out", request=http_request) from e
        except httpx.NetworkError as e:
            logger.error(f"Network error occurred for {request.masked_url()}: {e}")
            raise NetworkError(f"Network error: {e}", request=http_request) from e
        except httpx.RequestError as e:
            logger.error(f"HTTP request error for {request.masked_url()}: {e}")
            raise GraphloomRequestError(
                f"HTTP request error: {e}", request=http_request
            ) from e

        logger.debug(f"Received response: {response.status_code} for {request.method} {request.masked_url()}")
        logger.trace(f"Response Headers: {response.headers}")

        for hook in self._settings.post_request_hooks:
            try:
                hook(response)
            except Exception as e:
                logger.error(
                    f"Error executing post-request hook {getattr(hook, '__name__', str(hook))}: {e}"
                )

        return response

    # --- Lifecycle ---

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._should_close_client and not self._http_client.is_closed:
            self._http_client.close()
            logger.debug("GraphOAuthClient internal HTTP client closed.")

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        self.close()
