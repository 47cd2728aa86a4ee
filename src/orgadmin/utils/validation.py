"""
Input validation utilities.

Validates resolver arguments before any document is touched.
"""

from typing import Any, Dict, List

from .errors import AppError, ErrorCode


def validate_id_list(value: Any, name: str) -> List[str]:
    """
    Validate an argument holding a list of IDs.

    Args:
        value: Raw argument value
        name: Argument name, reported back on failure

    Returns:
        The list of IDs with surrounding whitespace stripped

    Raises:
        AppError: If value is not a list of non-empty strings
    """
    if not isinstance(value, list):
        raise AppError(ErrorCode.INVALID_INPUT, f"{name} must be a list of IDs", {"param": name})

    ids = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise AppError(
                ErrorCode.INVALID_INPUT,
                f"{name} must only contain non-empty string IDs",
                {"param": name},
            )
        ids.append(item.strip())
    return ids


def validate_input_object(value: Any, name: str) -> Dict[str, Any]:
    """
    Validate a GraphQL input object argument.

    Raises:
        AppError: If value is missing or not an object
    """
    if not isinstance(value, dict):
        raise AppError(ErrorCode.INVALID_INPUT, f"{name} is required", {"param": name})
    return value
