"""Request resolution, response classification and endpoint registry"""

from .classifier import classify_response
from .errors import EndpointSpecError, NoMatchingResponseError, ValidationError
from .registry import EndpointRegistry
from .resolver import resolve_request
from .schema import schema_errors, validate_value

__all__ = [
    "resolve_request",
    "classify_response",
    "EndpointRegistry",
    "EndpointSpecError",
    "ValidationError",
    "NoMatchingResponseError",
    "schema_errors",
    "validate_value",
]
