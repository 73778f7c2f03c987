"""Tests for the Notion endpoint catalog"""

import pytest

from endpointspec.core import classify_response, resolve_request
from endpointspec.integrations.notion import (
    NOTION_ENDPOINTS,
    get_bot_info,
    update_page,
)
from endpointspec.models import HTTPMethod, RequestInputs


class TestNotionCatalog:
    """Tests for the registered Notion endpoints"""

    def test_all_endpoints_registered(self) -> None:
        """Test that every endpoint is in the registry"""
        assert NOTION_ENDPOINTS.names() == [
            "getUser",
            "listUsers",
            "getBotInfo",
            "getPage",
            "createPage",
            "updatePage",
            "search",
        ]

    @pytest.mark.parametrize("name", NOTION_ENDPOINTS.names())
    def test_endpoints_are_exhaustive(self, name: str) -> None:
        """Test that every endpoint ends with a catch-all"""
        endpoint = NOTION_ENDPOINTS.get(name)
        assert endpoint.is_exhaustive is True
        assert endpoint.responses[-1].name == "Error"
        assert "oauth" in endpoint.security

    def test_tags(self) -> None:
        """Test grouping by tag"""
        assert [e.name for e in NOTION_ENDPOINTS.by_tag("users")] == [
            "getUser",
            "listUsers",
            "getBotInfo",
        ]
        assert [e.name for e in NOTION_ENDPOINTS.by_tag("search")] == ["search"]


def test_get_bot_info_has_no_path_parameters() -> None:
    """Test resolving an endpoint with only a header parameter"""
    request = resolve_request(get_bot_info)
    assert request.path == "/users/me"
    assert request.method == HTTPMethod.GET


def test_update_page_round_trip() -> None:
    """Test resolving and classifying a PATCH call"""
    inputs = RequestInputs(parameters={"page_id": "p-1"}, body={"archived": True})
    request = resolve_request(update_page, inputs)
    assert request.method == HTTPMethod.PATCH
    assert request.path == "/pages/p-1"
    assert request.body == b'{"archived":true}'

    assert classify_response(update_page, 200, {"object": "page"}).success is True
    assert classify_response(update_page, 409, {"object": "error"}).success is False
