"""URL building and escaping utilities"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlparse, urlunparse

from endpointspec.models.endpoint import PLACEHOLDER_PATTERN


def normalize_base_url(url: str) -> str:
    """
    Normalize an API base URL.

    - Ensures https:// scheme if no scheme provided
    - Removes trailing slashes
    - Removes query and fragment
    - Lowercases domain

    Args:
        url: Base URL to normalize

    Returns:
        Normalized base URL string

    Examples:
        >>> normalize_base_url("API.NOTION.COM/v1/")
        "https://api.notion.com/v1"
    """
    url = url.strip()

    if not url.lower().startswith(("http://", "https://")):
        url = f"https://{url}"

    parsed = urlparse(url)

    return urlunparse((
        parsed.scheme.lower(),
        parsed.netloc.lower(),
        parsed.path.rstrip("/"),
        "",
        "",
        "",
    ))


def is_valid_url(url: str) -> bool:
    """
    Check if a URL is valid.

    Args:
        url: URL to validate

    Returns:
        True if URL has valid scheme and netloc
    """
    try:
        result = urlparse(url)
        return all([result.scheme, result.netloc])
    except ValueError:
        return False


def build_full_url(base_url: str, target: str) -> str:
    """
    Join a base URL and a request target (path plus optional query).

    Unlike ``urljoin`` this keeps any path prefix of the base URL, so a
    versioned base such as ``https://api.notion.com/v1`` is preserved.

    Examples:
        >>> build_full_url("https://api.notion.com/v1", "/users/abc")
        "https://api.notion.com/v1/users/abc"
        >>> build_full_url("https://example.com/", "search?q=x")
        "https://example.com/search?q=x"
    """
    if target.startswith(("http://", "https://")):
        return target

    return f"{normalize_base_url(base_url)}/{target.lstrip('/')}"


def format_scalar(value: Any) -> str:
    """
    Render a parameter value as a string.

    Booleans become ``true``/``false``, everything else uses ``str``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def escape_path_segment(value: Any) -> str:
    """Percent-escape a value for use as a single path segment (``/`` included)"""
    return quote(format_scalar(value), safe="")


def interpolate_path(template: str, values: Mapping[str, Any]) -> str:
    """
    Replace each ``{name}`` placeholder with the escaped value for ``name``.

    Raises:
        KeyError: If a placeholder has no value
    """
    return PLACEHOLDER_PATTERN.sub(
        lambda match: escape_path_segment(values[match.group(1)]),
        template,
    )
