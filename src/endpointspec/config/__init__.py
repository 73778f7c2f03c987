"""Configuration management for endpointspec"""

from .settings import Settings, get_settings, validate_environment

__all__ = ["Settings", "get_settings", "validate_environment"]
