"""endpointspec - declarative REST endpoint specifications

This is the core library that provides:
- EndpointSpec: immutable description of one API operation
- resolve_request / classify_response: the pure request and response contract
- HTTPClient: async transport that executes endpoint calls
- Integrations: ready-made endpoint catalogs (Notion)
"""

from endpointspec.core import (
    EndpointRegistry,
    NoMatchingResponseError,
    ValidationError,
    classify_response,
    resolve_request,
)
from endpointspec.models import (
    ClassifiedResponse,
    EndpointSpec,
    RequestInputs,
    ResolvedRequest,
    ResponseSpec,
)
from endpointspec.services import HTTPClient

__version__ = "0.1.0"

__all__ = [
    "EndpointSpec",
    "ResponseSpec",
    "RequestInputs",
    "ResolvedRequest",
    "ClassifiedResponse",
    "EndpointRegistry",
    "resolve_request",
    "classify_response",
    "ValidationError",
    "NoMatchingResponseError",
    "HTTPClient",
]
