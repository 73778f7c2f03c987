"""Render human-readable titles for endpoint calls"""

import re
from collections.abc import Mapping
from typing import Any

from endpointspec.models.endpoint import EndpointSpec, RequestInputs

TEMPLATE_PATTERN = re.compile(r"\$\{\s*(parameters|body)\.([\w.\-]+)\s*\}")


def render_display_title(
    endpoint: EndpointSpec,
    inputs: RequestInputs | Mapping[str, Any] | None = None,
) -> str:
    """
    Render an endpoint's display title for a specific call.

    ``${parameters.<name>}`` is replaced with the parameter value and
    ``${body.<dotted.path>}`` with a value from the request body. References
    that cannot be resolved render as an empty string.

    Falls back to the endpoint name when no display title is declared.

    Examples:
        >>> render_display_title(get_user, {"user_id": "abc"})
        "Get user info for user id abc"
        >>> render_display_title(search, RequestInputs(body={"query": "roadmap"}))
        "Search for roadmap"
    """
    template = endpoint.metadata.display_title
    if not template:
        return endpoint.name

    inputs = RequestInputs.coerce(inputs)

    def _replace(match: re.Match) -> str:
        source, reference = match.group(1), match.group(2)
        if source == "parameters":
            value = inputs.parameters.get(reference)
            if value is None:
                param = endpoint.get_parameter(reference)
                value = param.default if param else None
        else:
            value = _lookup(inputs.body, reference.split("."))
        return "" if value is None else str(value)

    return TEMPLATE_PATTERN.sub(_replace, template)


def _lookup(data: Any, keys: list[str]) -> Any:
    for key in keys:
        if not isinstance(data, Mapping):
            return None
        data = data.get(key)
    return data
