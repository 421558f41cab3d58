from unittest.mock import MagicMock

import httpx
import pytest

from graphloom.exceptions import APIError, ParseError
from graphloom.models import GraphPost
from graphloom.responses import GraphResponse, GraphTokenResponse, extract_api_error

REQUEST = httpx.Request("GET", "https://graph.facebook.com/v2.9/123_456")

ERROR_ENVELOPE = {
    "error": {
        "message": "Error validating access token: Session has expired.",
        "type": "OAuthException",
        "code": 190,
        "error_subcode": 463,
        "fbtrace_id": "H2il2t5bn4e",
    }
}


def make_response(status_code=200, **kwargs) -> httpx.Response:
    return httpx.Response(status_code, request=REQUEST, **kwargs)


def test_success_is_parsed_and_wrapped():
    raw = make_response(json={"id": "123_456", "message": "hello"}, headers={"x-fb-trace-id": "abc"})

    wrapped = GraphResponse.parse_response(raw, GraphPost.parse)

    assert isinstance(wrapped.body, GraphPost)
    assert wrapped.body.has_message
    assert wrapped.response is raw
    assert wrapped.status_code == 200
    assert wrapped.headers["x-fb-trace-id"] == "abc"


def test_none_response_maps_to_none():
    parser = MagicMock()

    assert GraphResponse.parse_response(None, parser) is None
    assert GraphTokenResponse.parse_token_response(None) is None
    parser.assert_not_called()


@pytest.mark.parametrize("status_code", [400, 200])
def test_error_envelope_raises_without_parsing(status_code):
    parser = MagicMock()

    with pytest.raises(APIError) as exc_info:
        GraphResponse.parse_response(make_response(status_code, json=ERROR_ENVELOPE), parser)

    error = exc_info.value
    assert error.code == 190
    assert error.error_subcode == 463
    assert error.error_type == "OAuthException"
    assert error.fbtrace_id == "H2il2t5bn4e"
    assert error.error["message"].startswith("Error validating access token")
    assert error.response.status_code == status_code
    assert str(error).startswith("[OAuthException #190] Error validating access token")
    parser.assert_not_called()


def test_http_error_without_envelope():
    with pytest.raises(APIError) as exc_info:
        GraphResponse.parse_response(make_response(502, text="Bad Gateway"), GraphPost.parse)

    assert exc_info.value.code is None
    assert "502" in str(exc_info.value)
    assert "https://graph.facebook.com/v2.9/123_456" in str(exc_info.value)


@pytest.mark.parametrize(
    "kwargs",
    [{"text": "not json"}, {"json": [1, 2, 3]}, {"json": "just a string"}],
)
def test_non_object_body_raises_parse_error(kwargs):
    with pytest.raises(ParseError):
        GraphResponse.parse_response(make_response(**kwargs), GraphPost.parse)


def test_parser_failures_become_parse_errors():
    raw = make_response(json={"message": "no id"})
    with pytest.raises(ParseError) as exc_info:
        GraphResponse.parse_response(raw, GraphPost.parse)
    assert exc_info.value.response is raw

    with pytest.raises(ParseError):
        GraphResponse.parse_response(make_response(json={}), lambda payload: None)


def test_extract_api_error_oauth_string_form():
    error = extract_api_error(
        {"error": "invalid_request", "error_description": "Missing redirect_uri"}
    )

    assert error.error_type == "invalid_request"
    assert error.message == "Missing redirect_uri"
    assert error.code is None


def test_extract_api_error_without_envelope():
    assert extract_api_error({"id": "1"}) is None
    assert extract_api_error([1]) is None
    assert extract_api_error({"error": 42}) is None
