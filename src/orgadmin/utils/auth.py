"""
Authorization utilities for organization-scoped mutations.

Implements the admin model: a caller may administer an organization when
listed in its admins, or when the caller's account is a SUPERADMIN.
"""

from typing import Any, Dict, Optional

from .documents import get_document
from .dynamodb import TableAccessor, tables
from .errors import USER_NOT_AUTHORIZED_ADMIN, UnauthorizedError
from .logging import get_logger

logger = get_logger(__name__)

SUPERADMIN = "SUPERADMIN"


def is_organization_admin(user_id: str, organization: Dict[str, Any]) -> bool:
    """Check if user_id appears in the organization's admins."""
    return user_id in (organization.get("admins") or [])


def is_super_admin(user: Optional[Dict[str, Any]]) -> bool:
    """Check if a user record has platform-wide admin rights."""
    return user is not None and user.get("userType") == SUPERADMIN


def admin_check(
    user_id: str,
    organization: Dict[str, Any],
    accessor: Optional[TableAccessor] = None,
    user: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Require the caller to administer the organization.

    The caller's user record is only read when they are not a listed admin,
    to check for SUPERADMIN.

    Args:
        user_id: Normalized caller ID (USER#...)
        organization: Organization document
        accessor: Tables to read the caller from (defaults to the default tenant)
        user: Caller's user document, if the handler already loaded it

    Raises:
        UnauthorizedError: If the caller is neither an admin nor a SUPERADMIN
    """
    if is_organization_admin(user_id, organization):
        return

    if user is None:
        user = get_document((accessor or tables).users, "userId", user_id)

    if is_super_admin(user):
        logger.info(
            "SUPERADMIN bypassed organization admin check",
            userId=user_id,
            organizationId=organization.get("organizationId"),
        )
        return

    raise UnauthorizedError(USER_NOT_AUTHORIZED_ADMIN)
