"""Parameters shared across Notion endpoints"""

from endpointspec.models import ParameterLocation, ParameterSpec

NOTION_VERSION = "2022-06-28"

PAGE_ID_PARAM = ParameterSpec(
    name="page_id",
    location=ParameterLocation.PATH,
    description="Identifier for a Notion page",
    json_schema={"type": "string"},
    required=True,
)

VERSION_HEADER_PARAM = ParameterSpec(
    name="Notion-Version",
    location=ParameterLocation.HEADER,
    description="The API version to use for this request",
    json_schema={"type": "string"},
    required=True,
    default=NOTION_VERSION,
)
