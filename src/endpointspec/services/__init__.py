"""Transport services"""

from .http_client import HTTPClient, parse_response_body

__all__ = ["HTTPClient", "parse_response_body"]
