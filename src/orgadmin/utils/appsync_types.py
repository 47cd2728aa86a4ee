"""
Helpers for reading AppSync Lambda resolver events.

Covers the caller identity, resolver arguments, the GraphQL field name, and
the tenant a request is scoped to.
"""

from typing import Any, Dict, Optional


def get_caller_id(event: Dict[str, Any]) -> Optional[str]:
    """Extract caller's Cognito sub (user ID) from event, or None."""
    identity: Dict[str, Any] = event.get("identity") or {}
    result: Optional[str] = identity.get("sub")
    return result


def get_caller_id_required(event: Dict[str, Any]) -> str:
    """
    Extract caller's Cognito sub (user ID) from event.

    Raises:
        ValueError: If caller ID is not present
    """
    caller_id = get_caller_id(event)
    if not caller_id:
        raise ValueError("Caller ID (identity.sub) is required")
    return caller_id


def get_argument(event: Dict[str, Any], name: str, default: Any = None) -> Any:
    """
    Extract an argument from the event.

    Args:
        event: AppSync event
        name: Argument name
        default: Default value if not present

    Returns:
        Argument value or default
    """
    return (event.get("arguments") or {}).get(name, default)


def get_field_name(event: Dict[str, Any]) -> Optional[str]:
    """GraphQL field being resolved (e.g. 'removeMember')."""
    info: Dict[str, Any] = event.get("info") or {}
    return info.get("fieldName")


def get_tenant_id(event: Dict[str, Any]) -> Optional[str]:
    """
    Extract the tenant the request is scoped to.

    Checks the x-tenant-id request header first, then the custom:tenantId
    identity claim. Returns None when neither is present.
    """
    headers = (event.get("request") or {}).get("headers") or {}
    if headers.get("x-tenant-id"):
        return str(headers["x-tenant-id"])

    claims = (event.get("identity") or {}).get("claims") or {}
    if claims.get("custom:tenantId"):
        return str(claims["custom:tenantId"])

    return None
