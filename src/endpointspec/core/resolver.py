"""Turn an endpoint specification plus caller inputs into a concrete request"""

import json
from collections.abc import Mapping
from typing import Any

from endpointspec.core.errors import ValidationError
from endpointspec.core.schema import schema_errors
from endpointspec.models.endpoint import (
    EndpointSpec,
    ParameterLocation,
    ParameterSpec,
    RequestInputs,
    ResolvedRequest,
)
from endpointspec.utils.url_helpers import format_scalar, interpolate_path

JSON_CONTENT_TYPE = "application/json"


def resolve_request(
    endpoint: EndpointSpec,
    inputs: RequestInputs | Mapping[str, Any] | None = None,
) -> ResolvedRequest:
    """
    Resolve an endpoint specification into a concrete request.

    Path placeholders are replaced with escaped parameter values, query
    parameters are appended in declaration order, and headers are merged as
    default content type, then parameter headers, then the endpoint's static
    headers (later wins). Never performs I/O.

    Args:
        endpoint: Endpoint to resolve
        inputs: Parameter values and body. A plain mapping is treated as
            parameter values with no body.

    Returns:
        ResolvedRequest for the endpoint

    Raises:
        ValidationError: If a required parameter is missing, an unknown
            parameter is supplied, a value does not match its schema, or the
            body is missing, unexpected or invalid

    Examples:
        >>> resolve_request(get_user, {"user_id": "abc-123"}).path
        "/users/abc-123"
    """
    inputs = RequestInputs.coerce(inputs)
    errors: list[str] = []

    supplied: dict[str, Any] = {}
    for name, value in inputs.parameters.items():
        param = _match_parameter(endpoint, name)
        if param is None:
            errors.append(f"Unknown parameter: '{name}'")
        elif param.name in supplied:
            errors.append(f"Parameter '{param.name}' supplied more than once")
        else:
            supplied[param.name] = value

    values: dict[str, Any] = {}
    for param in endpoint.parameters:
        value = supplied.get(param.name)
        if value is None:
            value = param.default
        if value is None:
            if param.required:
                errors.append(f"Missing required parameter: '{param.name}'")
            continue

        problems = schema_errors(value, param.json_schema)
        if problems:
            errors.append(f"Invalid value for parameter '{param.name}': {problems[0]}")
            continue
        values[param.name] = value

    body = _serialize_body(endpoint, inputs.body, errors)

    if errors:
        raise ValidationError(errors)

    path = interpolate_path(endpoint.path, values)

    query: list[tuple[str, str]] = []
    headers: dict[str, str] = {}
    if body is not None:
        headers["Content-Type"] = JSON_CONTENT_TYPE

    for param in endpoint.parameters:
        if param.name not in values:
            continue
        value = values[param.name]

        if param.location == ParameterLocation.QUERY:
            if isinstance(value, (list, tuple)):
                query.extend((param.name, format_scalar(item)) for item in value)
            else:
                query.append((param.name, format_scalar(value)))
        elif param.location == ParameterLocation.HEADER:
            if isinstance(value, (list, tuple)):
                value = ",".join(format_scalar(item) for item in value)
            _set_header(headers, param.name, format_scalar(value))

    for key, value in endpoint.request.headers.items():
        _set_header(headers, key, value)

    return ResolvedRequest(
        method=endpoint.method,
        path=path,
        query=tuple(query),
        headers=headers,
        body=body,
    )


def _serialize_body(endpoint: EndpointSpec, body: Any, errors: list[str]) -> bytes | None:
    body_spec = endpoint.request.body

    if body_spec is None:
        if body is not None:
            errors.append(f"Endpoint '{endpoint.name}' does not accept a request body")
        return None

    if body is None:
        errors.append("Missing request body")
        return None

    problems = schema_errors(body, body_spec.json_schema)
    if problems:
        errors.append(f"Invalid request body: {problems[0]}")
        return None

    try:
        return json.dumps(body, sort_keys=True, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as e:
        errors.append(f"Request body is not JSON serializable: {e}")
        return None


def _set_header(headers: dict[str, str], key: str, value: str) -> None:
    """Set a header, replacing any existing key that differs only in case"""
    for existing in [k for k in headers if k.lower() == key.lower()]:
        del headers[existing]
    headers[key] = value


def _match_parameter(endpoint: EndpointSpec, name: Any) -> ParameterSpec | None:
    """Find the parameter for a supplied name; header names ignore case"""
    if not isinstance(name, str):
        return None

    param = endpoint.get_parameter(name)
    if param is not None:
        return param

    for candidate in endpoint.parameters:
        if (
            candidate.location == ParameterLocation.HEADER
            and candidate.name.lower() == name.lower()
        ):
            return candidate
    return None
