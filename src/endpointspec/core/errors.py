"""Errors raised while resolving requests and classifying responses"""


class EndpointSpecError(Exception):
    """Base class for all endpointspec errors"""


class ValidationError(EndpointSpecError):
    """
    Caller inputs do not satisfy an endpoint's parameter or body constraints.

    All problems found in a single resolve call are collected in ``errors``.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid request inputs")


class NoMatchingResponseError(EndpointSpecError):
    """No response descriptor matched an observed status code"""

    def __init__(self, endpoint_name: str, status_code: int) -> None:
        self.endpoint_name = endpoint_name
        self.status_code = status_code
        super().__init__(
            f"No response matched status {status_code} for endpoint '{endpoint_name}' "
            "(the endpoint is missing a catch-all response)"
        )
