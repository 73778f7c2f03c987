"""Request and response body schemas for Notion endpoints.

Responses are only checked for being JSON objects; the full Notion object
model is left to the API itself.
"""

OBJECT_SCHEMA = {"type": "object"}

CREATE_PAGE_BODY = {
    "type": "object",
    "properties": {
        "parent": {"type": "object"},
        "properties": {"type": "object"},
        "children": {"type": "array"},
        "icon": {"type": ["object", "null"]},
        "cover": {"type": ["object", "null"]},
    },
    "required": ["parent", "properties"],
}

UPDATE_PAGE_BODY = {
    "type": "object",
    "properties": {
        "properties": {"type": "object"},
        "archived": {"type": "boolean"},
        "icon": {"type": ["object", "null"]},
        "cover": {"type": ["object", "null"]},
    },
}

SEARCH_BODY = {
    "type": "object",
    "properties": {
        "query": {"type": "string"},
        "sort": {"type": "object"},
        "filter": {"type": "object"},
        "start_cursor": {"type": "string"},
        "page_size": {"type": "integer"},
    },
}
