"""Utility functions"""

from .display import render_display_title
from .url_helpers import (
    build_full_url,
    escape_path_segment,
    format_scalar,
    interpolate_path,
    is_valid_url,
    normalize_base_url,
)

__all__ = [
    # URL helpers
    "normalize_base_url",
    "is_valid_url",
    "build_full_url",
    "format_scalar",
    "escape_path_segment",
    "interpolate_path",
    # Display
    "render_display_title",
]
