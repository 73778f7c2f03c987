"""Notion REST endpoint specifications"""

from endpointspec.models import (
    EndpointMetadata,
    EndpointSpec,
    ExternalDocs,
    HTTPMethod,
    ParameterLocation,
    ParameterSpec,
    RequestBodySpec,
    RequestSpec,
    error_response,
    success_response,
)

from .params import PAGE_ID_PARAM, VERSION_HEADER_PARAM
from .schemas import CREATE_PAGE_BODY, OBJECT_SCHEMA, SEARCH_BODY, UPDATE_PAGE_BODY

NOTION_API_BASE_URL = "https://api.notion.com/v1"

ERROR_RESPONSE = error_response()

JSON_HEADERS = {"Content-Type": "application/json"}


def _docs(url: str) -> ExternalDocs:
    return ExternalDocs(url=url, description="API method documentation")


get_user = EndpointSpec(
    path="/users/{user_id}",
    method=HTTPMethod.GET,
    metadata=EndpointMetadata(
        name="getUser",
        description="Get a user's information",
        display_title="Get user info for user id ${parameters.user_id}",
        external_docs=_docs("https://developers.notion.com/reference/get-user"),
        tags=("users",),
    ),
    security=("oauth",),
    parameters=(
        ParameterSpec(
            name="user_id",
            location=ParameterLocation.PATH,
            description="ID of the user you would like info about",
            json_schema={"type": "string"},
            required=True,
        ),
        VERSION_HEADER_PARAM,
    ),
    responses=(success_response(OBJECT_SCHEMA), ERROR_RESPONSE),
)

list_users = EndpointSpec(
    path="/users",
    method=HTTPMethod.GET,
    metadata=EndpointMetadata(
        name="listUsers",
        description=(
            "Returns a paginated list of Users for the workspace. "
            "The response may contain fewer than page_size of results."
        ),
        display_title="List users",
        external_docs=_docs("https://developers.notion.com/reference/get-users"),
        tags=("users",),
    ),
    security=("oauth",),
    parameters=(
        VERSION_HEADER_PARAM,
        ParameterSpec(
            name="start_cursor",
            location=ParameterLocation.QUERY,
            description=(
                "The cursor to start from. If not provided, the default is to "
                "start from the beginning of the list."
            ),
            json_schema={"type": "string"},
        ),
        ParameterSpec(
            name="page_size",
            location=ParameterLocation.QUERY,
            description="The number of results to return. The maximum is 100.",
            json_schema={"type": "integer", "minimum": 1, "maximum": 100},
        ),
    ),
    responses=(success_response(OBJECT_SCHEMA), ERROR_RESPONSE),
)

get_bot_info = EndpointSpec(
    path="/users/me",
    method=HTTPMethod.GET,
    metadata=EndpointMetadata(
        name="getBotInfo",
        description="Get the bot's info",
        display_title="Get the bot's info",
        external_docs=_docs("https://developers.notion.com/reference/get-self"),
        tags=("users",),
    ),
    security=("oauth",),
    parameters=(VERSION_HEADER_PARAM,),
    responses=(success_response(OBJECT_SCHEMA), ERROR_RESPONSE),
)

get_page = EndpointSpec(
    path="/pages/{page_id}",
    method=HTTPMethod.GET,
    metadata=EndpointMetadata(
        name="getPage",
        description="Retrieves a Page object using the ID specified.",
        display_title="Get the page info for page id ${parameters.page_id}",
        external_docs=_docs("https://developers.notion.com/reference/retrieve-a-page"),
        tags=("pages",),
    ),
    security=("oauth",),
    parameters=(
        PAGE_ID_PARAM,
        VERSION_HEADER_PARAM,
        ParameterSpec(
            name="filter_properties",
            location=ParameterLocation.QUERY,
            description="The properties to filter by",
            json_schema={"type": "array", "items": {"type": "string"}},
        ),
    ),
    responses=(success_response(OBJECT_SCHEMA), ERROR_RESPONSE),
)

create_page = EndpointSpec(
    path="/pages",
    method=HTTPMethod.POST,
    metadata=EndpointMetadata(
        name="createPage",
        description=(
            "Creates a new page that is a child of an existing page or database. "
            "If the parent is a page then `title` is the only valid property. If the "
            "parent is a database then the `properties` must match the parent "
            "database's properties."
        ),
        display_title="Create a page",
        external_docs=_docs("https://developers.notion.com/reference/post-page"),
        tags=("pages",),
    ),
    security=("oauth",),
    parameters=(VERSION_HEADER_PARAM,),
    request=RequestSpec(
        headers=JSON_HEADERS,
        body=RequestBodySpec(json_schema=CREATE_PAGE_BODY),
    ),
    responses=(success_response(OBJECT_SCHEMA), ERROR_RESPONSE),
)

update_page = EndpointSpec(
    path="/pages/{page_id}",
    method=HTTPMethod.PATCH,
    metadata=EndpointMetadata(
        name="updatePage",
        description=(
            "Update a page icon, cover or archived status. You can update a database "
            "page's properties but the properties must match the parent database schema."
        ),
        display_title="Update page ${parameters.page_id}",
        external_docs=_docs("https://developers.notion.com/reference/patch-page"),
        tags=("pages",),
    ),
    security=("oauth",),
    parameters=(PAGE_ID_PARAM, VERSION_HEADER_PARAM),
    request=RequestSpec(
        headers=JSON_HEADERS,
        body=RequestBodySpec(json_schema=UPDATE_PAGE_BODY),
    ),
    responses=(success_response(OBJECT_SCHEMA), ERROR_RESPONSE),
)

search = EndpointSpec(
    path="/search",
    method=HTTPMethod.POST,
    metadata=EndpointMetadata(
        name="search",
        description=(
            "Searches all original pages, databases, and child pages/databases that "
            "are shared with the integration. It will not return linked databases, "
            "since these duplicate their source databases."
        ),
        display_title="Search for ${body.query}",
        external_docs=_docs("https://developers.notion.com/reference/post-search"),
        tags=("search",),
    ),
    security=("oauth",),
    parameters=(VERSION_HEADER_PARAM,),
    request=RequestSpec(body=RequestBodySpec(json_schema=SEARCH_BODY)),
    responses=(success_response(OBJECT_SCHEMA), ERROR_RESPONSE),
)
