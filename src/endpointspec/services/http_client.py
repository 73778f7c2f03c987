"""HTTP transport for executing resolved endpoint requests"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from endpointspec.config import get_settings
from endpointspec.core import classify_response, resolve_request
from endpointspec.models import ClassifiedResponse, EndpointSpec, RequestInputs, ResolvedRequest
from endpointspec.utils.url_helpers import build_full_url, is_valid_url, normalize_base_url

logger = logging.getLogger(__name__)

OAUTH_SCHEME = "oauth"


class HTTPClient:
    """
    HTTP client that sends resolved requests and classifies the responses.

    Features:
    - Async support
    - Automatic retries on connection errors and timeouts
    - Bearer token for endpoints that declare the ``oauth`` scheme
    - Non-2xx responses are classified, never raised
    """

    def __init__(
        self,
        base_url: str | None = None,
        access_token: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        headers: dict[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
        backoff: float = 1.0,
    ) -> None:
        """
        Initialize HTTP client.

        Args:
            base_url: API base URL (default from settings)
            access_token: OAuth access token (default from settings)
            timeout: Request timeout in seconds (default from settings)
            max_retries: Maximum number of attempts (default from settings);
                values below 1 still make a single attempt
            headers: Default headers to include in all requests
            client: Shared AsyncClient to use instead of one per request
            backoff: Multiplier for the exponential wait between retries
        """
        self.settings = get_settings()
        self.base_url = normalize_base_url(base_url or self.settings.api_base_url)
        if not is_valid_url(self.base_url):
            raise ValueError(f"Invalid API base URL: {base_url!r}")
        self.access_token = access_token if access_token is not None else self.settings.api_access_token
        self.timeout = timeout if timeout is not None else self.settings.request_timeout
        self.max_retries = max_retries if max_retries is not None else self.settings.max_retries
        self.backoff = backoff
        self.default_headers = headers or {
            "User-Agent": self.settings.user_agent,
            "Accept": "application/json",
        }
        self._client = client

    async def send(
        self,
        request: ResolvedRequest,
        headers: Mapping[str, str] | None = None,
    ) -> tuple[int, Any]:
        """
        Send a resolved request.

        Args:
            request: Request produced by ``resolve_request``
            headers: Extra headers; the request's own headers take precedence

        Returns:
            Tuple of status code and body (parsed JSON, text, or None when empty)

        Raises:
            httpx.TimeoutException: When every attempt timed out
            httpx.NetworkError: When every attempt failed to connect
        """
        url = build_full_url(self.base_url, request.target)
        merged_headers = {**self.default_headers, **(headers or {}), **request.headers}

        @retry(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=self.backoff, max=10),
            retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        async def _make_request() -> httpx.Response:
            if self._client is not None:
                return await self._client.request(
                    request.method.value, url, headers=merged_headers, content=request.body
                )
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.request(
                    request.method.value, url, headers=merged_headers, content=request.body
                )

        logger.debug(f"{request.method.value} {url}")
        response = await _make_request()
        logger.debug(f"{request.method.value} {url} -> {response.status_code}")

        return response.status_code, parse_response_body(response)

    async def execute(
        self,
        endpoint: EndpointSpec,
        inputs: RequestInputs | Mapping[str, Any] | None = None,
    ) -> ClassifiedResponse:
        """
        Resolve, send and classify one endpoint call.

        Args:
            endpoint: Endpoint to call
            inputs: Parameter values and body

        Returns:
            ClassifiedResponse for the received status code and body

        Raises:
            ValidationError: If the inputs do not satisfy the endpoint
            NoMatchingResponseError: If the endpoint has no matching response
            httpx.HTTPError: On transport failure after retries
        """
        request = resolve_request(endpoint, inputs)

        auth_headers: dict[str, str] = {}
        if OAUTH_SCHEME in endpoint.security and self.access_token:
            auth_headers["Authorization"] = f"Bearer {self.access_token}"

        status_code, body = await self.send(request, headers=auth_headers)
        return classify_response(endpoint, status_code, body)


def parse_response_body(response: httpx.Response) -> Any:
    """
    Parse a response body.

    Returns parsed JSON for JSON responses, text otherwise, and None for an
    empty body.
    """
    if not response.content:
        return None

    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError:
            return response.text
    return response.text
