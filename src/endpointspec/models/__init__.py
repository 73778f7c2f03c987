"""Data models for endpointspec"""

from .endpoint import (
    AnyStatus,
    ClassifiedResponse,
    EndpointMetadata,
    EndpointSpec,
    ExternalDocs,
    HTTPMethod,
    OutsideStatusRange,
    ParameterLocation,
    ParameterSpec,
    RequestBodySpec,
    RequestInputs,
    RequestSpec,
    ResolvedRequest,
    ResponseSpec,
    StatusMatcher,
    StatusRange,
    error_response,
    success_response,
)

__all__ = [
    "EndpointSpec",
    "EndpointMetadata",
    "ExternalDocs",
    "HTTPMethod",
    "ParameterLocation",
    "ParameterSpec",
    "RequestSpec",
    "RequestBodySpec",
    "ResponseSpec",
    "StatusMatcher",
    "StatusRange",
    "OutsideStatusRange",
    "AnyStatus",
    "RequestInputs",
    "ResolvedRequest",
    "ClassifiedResponse",
    "success_response",
    "error_response",
]
