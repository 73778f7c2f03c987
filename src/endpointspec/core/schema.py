"""JSON Schema validation of parameter and body values"""

from collections.abc import Mapping
from typing import Any

from jsonschema import Draft202012Validator


def _thaw(value: Any) -> Any:
    """Convert read-only mappings and tuples back to dicts and lists"""
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


def schema_errors(value: Any, schema: Mapping[str, Any]) -> list[str]:
    """
    Collect validation messages for a value against a JSON Schema.

    Args:
        value: Value to check
        schema: JSON Schema (an empty schema accepts anything)

    Returns:
        List of error messages, empty when the value conforms

    Examples:
        >>> schema_errors(5, {"type": "integer"})
        []
        >>> schema_errors("abc", {"type": "integer"})
        ["'abc' is not of type 'integer'"]
    """
    if not schema:
        return []

    validator = Draft202012Validator(_thaw(schema))
    return [error.message for error in validator.iter_errors(value)]


def validate_value(value: Any, schema: Mapping[str, Any]) -> bool:
    """Check whether a value conforms to a JSON Schema"""
    return not schema_errors(value, schema)
