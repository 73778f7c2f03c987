"""Tests for response classification"""

import pytest

from endpointspec.core import NoMatchingResponseError, classify_response, resolve_request
from endpointspec.models import (
    AnyStatus,
    EndpointMetadata,
    EndpointSpec,
    HTTPMethod,
    ParameterLocation,
    ParameterSpec,
    ResponseSpec,
    error_response,
    success_response,
)


@pytest.fixture
def user_endpoint() -> EndpointSpec:
    """Endpoint following the success plus catch-all convention"""
    return EndpointSpec(
        path="/users/{user_id}",
        method=HTTPMethod.GET,
        metadata=EndpointMetadata(name="getUser"),
        parameters=[
            ParameterSpec(name="user_id", location=ParameterLocation.PATH, required=True)
        ],
        responses=[success_response(), error_response()],
    )


def _always(name: str) -> ResponseSpec:
    return ResponseSpec(match=AnyStatus(), success=True, name=name)


class TestClassifyResponse:
    """Tests for classify_response"""

    def test_success_status(self, user_endpoint: EndpointSpec) -> None:
        """Test that a 2xx status selects the success response"""
        result = classify_response(user_endpoint, 200, {"object": "user"})
        assert result.success is True
        assert result.name == "Success"
        assert result.status_code == 200
        assert result.body == {"object": "user"}

    def test_no_content_is_success(self, user_endpoint: EndpointSpec) -> None:
        """Test that 204 is classified as success"""
        assert classify_response(user_endpoint, 204).success is True

    def test_not_found_is_error(self, user_endpoint: EndpointSpec) -> None:
        """Test that 404 falls through to the catch-all"""
        result = classify_response(user_endpoint, 404, {"object": "error"})
        assert result.success is False
        assert result.name == "Error"

    def test_informational_is_error(self, user_endpoint: EndpointSpec) -> None:
        """Test that statuses below 200 hit the catch-all"""
        assert classify_response(user_endpoint, 101).success is False

    def test_first_match_wins(self) -> None:
        """Test that the earlier of two matching responses is chosen"""
        first, second = _always("First"), _always("Second")
        forward = EndpointSpec(path="/x", method=HTTPMethod.GET, responses=[first, second])
        backward = EndpointSpec(path="/x", method=HTTPMethod.GET, responses=[second, first])

        assert classify_response(forward, 200).name == "First"
        assert classify_response(backward, 200).name == "Second"

    def test_returns_matched_descriptor(self, user_endpoint: EndpointSpec) -> None:
        """Test that the classified response carries the matched descriptor"""
        result = classify_response(user_endpoint, 500)
        assert result.response == user_endpoint.responses[1]

    def test_no_match_raises(self) -> None:
        """Test that a missing catch-all surfaces as NoMatchingResponseError"""
        endpoint = EndpointSpec(
            path="/users",
            method=HTTPMethod.GET,
            metadata=EndpointMetadata(name="listUsers"),
            responses=[success_response()],
        )
        with pytest.raises(NoMatchingResponseError) as exc_info:
            classify_response(endpoint, 500, {})
        assert exc_info.value.status_code == 500
        assert exc_info.value.endpoint_name == "listUsers"

    def test_empty_responses_raise(self) -> None:
        """Test that an endpoint without responses never classifies"""
        endpoint = EndpointSpec(path="/users", method=HTTPMethod.GET)
        with pytest.raises(NoMatchingResponseError, match="GET /users"):
            classify_response(endpoint, 200)


def test_resolve_then_classify(user_endpoint: EndpointSpec) -> None:
    """Test the full resolve and classify flow without a transport"""
    request = resolve_request(user_endpoint, {"user_id": "abc-123"})
    assert request.path == "/users/abc-123"

    ok = classify_response(user_endpoint, 200, {"id": "abc-123"})
    assert (ok.success, ok.name) == (True, "Success")

    missing = classify_response(user_endpoint, 404, {"code": "object_not_found"})
    assert (missing.success, missing.name) == (False, "Error")
