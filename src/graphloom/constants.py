# graphloom/constants.py
"""Constants shared across the graphloom client.

Base URLs and default values for the Graph API. Version-specific URLs are
composed at request time from these values and the configured API version.
"""

GRAPH_API_BASE_URL = "https://graph.facebook.com"
"""Host serving resource calls and token operations."""

WWW_BASE_URL = "https://www.facebook.com"
"""Host serving the interactive OAuth dialog."""

DEFAULT_API_VERSION = "v2.9"

OAUTH_DIALOG_PATH = "/dialog/oauth"
OAUTH_ACCESS_TOKEN_PATH = "/oauth/access_token"

DEFAULT_USER_AGENT = "graphloom/0.1.0"

# Query parameter names that must never appear unmasked in log output
SENSITIVE_PARAMS = frozenset({"access_token", "client_secret", "fb_exchange_token", "code"})
