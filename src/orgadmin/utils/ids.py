"""
ID normalization utilities for DynamoDB prefixed IDs.

Provides consistent handling of entity ID prefixes (USER#, ORG#, etc.)
across all Lambda handlers and utilities.
"""

from typing import Optional


def ensure_prefix(prefix: str, id_value: Optional[str]) -> Optional[str]:
    """
    Ensure an ID has the specified prefix.

    Args:
        prefix: Prefix without '#' (e.g., 'USER', 'ORG')
        id_value: ID to normalize, may be None

    Returns:
        ID with prefix, or None if input was None or empty

    Examples:
        >>> ensure_prefix('ORG', 'abc-123')
        'ORG#abc-123'
        >>> ensure_prefix('ORG', 'ORG#abc-123')
        'ORG#abc-123'
        >>> ensure_prefix('EVENT', None)
        None
    """
    if not id_value:
        return None
    wanted = f"{prefix}#"
    return id_value if id_value.startswith(wanted) else f"{wanted}{id_value}"


# Entity-specific helpers
def ensure_user_id(id_value: Optional[str]) -> Optional[str]:
    """Normalize user ID with USER# prefix."""
    return ensure_prefix("USER", id_value)


def ensure_organization_id(id_value: Optional[str]) -> Optional[str]:
    """Normalize organization ID with ORG# prefix."""
    return ensure_prefix("ORG", id_value)


def ensure_event_id(id_value: Optional[str]) -> Optional[str]:
    """Normalize event ID with EVENT# prefix."""
    return ensure_prefix("EVENT", id_value)


def ensure_chat_id(id_value: Optional[str]) -> Optional[str]:
    """Normalize group or direct chat ID with CHAT# prefix."""
    return ensure_prefix("CHAT", id_value)


def ensure_membership_request_id(id_value: Optional[str]) -> Optional[str]:
    """Normalize membership request ID with REQUEST# prefix."""
    return ensure_prefix("REQUEST", id_value)
