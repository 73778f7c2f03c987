"""Notion API endpoint catalog"""

from endpointspec.core import EndpointRegistry

from .endpoints import (
    ERROR_RESPONSE,
    NOTION_API_BASE_URL,
    create_page,
    get_bot_info,
    get_page,
    get_user,
    list_users,
    search,
    update_page,
)
from .params import NOTION_VERSION, PAGE_ID_PARAM, VERSION_HEADER_PARAM

NOTION_ENDPOINTS = EndpointRegistry(
    [get_user, list_users, get_bot_info, get_page, create_page, update_page, search]
)

__all__ = [
    "NOTION_ENDPOINTS",
    "NOTION_API_BASE_URL",
    "NOTION_VERSION",
    "ERROR_RESPONSE",
    "PAGE_ID_PARAM",
    "VERSION_HEADER_PARAM",
    "get_user",
    "list_users",
    "get_bot_info",
    "get_page",
    "create_page",
    "update_page",
    "search",
]
