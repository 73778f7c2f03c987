"""Select the response descriptor that matches an observed response"""

from typing import Any

from endpointspec.core.errors import NoMatchingResponseError
from endpointspec.models.endpoint import ClassifiedResponse, EndpointSpec


def classify_response(
    endpoint: EndpointSpec,
    status_code: int,
    body: Any = None,
) -> ClassifiedResponse:
    """
    Classify a response by the endpoint's ordered response descriptors.

    The first descriptor whose matcher accepts ``(status_code, body)`` wins.

    Args:
        endpoint: Endpoint the request was resolved from
        status_code: HTTP status code received
        body: Response body, raw or already parsed

    Returns:
        ClassifiedResponse referencing the matched descriptor

    Raises:
        NoMatchingResponseError: If no descriptor matches
    """
    for response in endpoint.responses:
        if response.matches(status_code, body):
            return ClassifiedResponse(response=response, status_code=status_code, body=body)

    raise NoMatchingResponseError(endpoint.name, status_code)
