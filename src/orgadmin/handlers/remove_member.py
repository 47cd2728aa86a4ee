"""Lambda resolver for the removeMember mutation.

Removes one or more members from an organization. Users are processed in
order; each one is fully validated and removed before the next is looked at,
so a failure part-way leaves earlier users removed.

Admins cannot remove other admins, and nobody can remove the organization's
creator.
"""

from typing import Any, Dict

from ..utils.appsync_types import get_argument, get_caller_id_required, get_tenant_id
from ..utils.auth import admin_check, is_organization_admin
from ..utils.documents import get_document, pull_from_lists
from ..utils.dynamodb import get_tables_for_tenant
from ..utils.errors import (
    ADMIN_CANNOT_REMOVE_ADMIN,
    ADMIN_CANNOT_REMOVE_CREATOR,
    MEMBER_NOT_FOUND,
    ORGANIZATION_NOT_FOUND,
    USER_NOT_FOUND,
    AppError,
    ErrorCode,
    NotFoundError,
    UnauthorizedError,
)
from ..utils.ids import ensure_organization_id, ensure_user_id
from ..utils.logging import request_logger
from ..utils.responses import OrganizationResponse, build_organization_response
from ..utils.validation import validate_id_list, validate_input_object


def lambda_handler(event: Dict[str, Any], context: Any) -> OrganizationResponse:
    """
    Remove members from an organization.

    GraphQL mutation: removeMember(data: UserListInput!)
        UserListInput { organizationId: ID!, userIds: [ID!]! }

    Returns:
        The organization after all removals

    Raises:
        AppError: If the input is malformed
        NotFoundError: If the organization, a user, or a membership is missing
        UnauthorizedError: If the caller is not an admin, or a target is an
            admin or the creator
    """
    logger = request_logger(__name__, event)
    caller_id = ensure_user_id(get_caller_id_required(event)) or ""
    data = validate_input_object(get_argument(event, "data"), "data")
    organization_id = ensure_organization_id(data.get("organizationId"))
    user_ids = [ensure_user_id(user_id) or "" for user_id in validate_id_list(data.get("userIds"), "userIds")]
    logger = logger.bind(organizationId=organization_id, callerId=caller_id)
    db = get_tables_for_tenant(get_tenant_id(event))

    logger.info("Removing members from organization", userCount=len(user_ids))

    try:
        organization = get_document(db.organizations, "organizationId", organization_id)
        if organization is None:
            raise NotFoundError(ORGANIZATION_NOT_FOUND)

        admin_check(caller_id, organization, db)

        for user_id in user_ids:
            user = get_document(db.users, "userId", user_id)
            if user is None:
                raise NotFoundError(USER_NOT_FOUND)

            if user_id not in (organization.get("members") or []):
                raise NotFoundError(MEMBER_NOT_FOUND)

            if is_organization_admin(user_id, organization):
                raise UnauthorizedError(ADMIN_CANNOT_REMOVE_ADMIN)

            if user_id == organization.get("creatorId"):
                raise UnauthorizedError(ADMIN_CANNOT_REMOVE_CREATOR)

            organization = pull_from_lists(
                db.organizations,
                {"organizationId": organization["organizationId"]},
                {"members": [user_id]},
            )
            if organization is None:
                raise NotFoundError(ORGANIZATION_NOT_FOUND)

            pull_from_lists(
                db.users,
                {"userId": user_id},
                {"joinedOrganizations": [organization["organizationId"]]},
            )
            logger.info("Member removed", userId=user_id)

        return build_organization_response(organization)

    except AppError as e:
        logger.warning("Member removal refused", errorCode=e.error_code, error=e.message)
        raise
    except Exception as e:
        logger.error("Failed to remove members", error=str(e))
        raise AppError(ErrorCode.INTERNAL_ERROR, "Failed to remove members") from e
