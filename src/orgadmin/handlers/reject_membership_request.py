"""Lambda resolver for the rejectMembershipRequest mutation.

An organization admin rejects a pending request to join the organization:
1. Load the membership request, its organization and the requesting user
2. Verify the caller administers the organization
3. Delete the request
4. Pull the request from the organization's and the user's membershipRequests
"""

from typing import Any, Dict

from ..utils.appsync_types import get_argument, get_caller_id_required, get_tenant_id
from ..utils.auth import admin_check
from ..utils.documents import get_document, pull_from_lists
from ..utils.dynamodb import get_tables_for_tenant
from ..utils.errors import (
    MEMBERSHIP_REQUEST_NOT_FOUND,
    ORGANIZATION_NOT_FOUND,
    USER_NOT_FOUND,
    AppError,
    ErrorCode,
    NotFoundError,
)
from ..utils.ids import ensure_membership_request_id, ensure_user_id
from ..utils.logging import request_logger
from ..utils.responses import MembershipRequestResponse, build_membership_request_response


def lambda_handler(event: Dict[str, Any], context: Any) -> MembershipRequestResponse:
    """
    Reject (delete) a membership request.

    GraphQL mutation: rejectMembershipRequest(membershipRequestId: ID!)

    Returns:
        The membership request as it was before deletion

    Raises:
        NotFoundError: If the request, its organization or its user is missing
        UnauthorizedError: If the caller is not an organization admin
    """
    logger = request_logger(__name__, event)
    caller_id = ensure_user_id(get_caller_id_required(event)) or ""
    request_id = ensure_membership_request_id(get_argument(event, "membershipRequestId"))
    db = get_tables_for_tenant(get_tenant_id(event))

    logger.info("Rejecting membership request", membershipRequestId=request_id, callerId=caller_id)

    try:
        membership_request = get_document(db.membership_requests, "membershipRequestId", request_id)
        if membership_request is None:
            raise NotFoundError(MEMBERSHIP_REQUEST_NOT_FOUND)

        organization = get_document(db.organizations, "organizationId", membership_request.get("organizationId"))
        if organization is None:
            raise NotFoundError(ORGANIZATION_NOT_FOUND)

        user = get_document(db.users, "userId", membership_request.get("userId"))
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)

        admin_check(caller_id, organization, db)

        db.membership_requests.delete_item(Key={"membershipRequestId": membership_request["membershipRequestId"]})
        pull_from_lists(
            db.organizations,
            {"organizationId": organization["organizationId"]},
            {"membershipRequests": [membership_request["membershipRequestId"]]},
        )
        pull_from_lists(
            db.users,
            {"userId": user["userId"]},
            {"membershipRequests": [membership_request["membershipRequestId"]]},
        )

        logger.info(
            "Membership request rejected",
            membershipRequestId=request_id,
            organizationId=organization["organizationId"],
            userId=user["userId"],
        )
        return build_membership_request_response(membership_request)

    except AppError as e:
        logger.warning("Membership request rejection refused", errorCode=e.error_code, error=e.message)
        raise
    except Exception as e:
        logger.error("Failed to reject membership request", error=str(e))
        raise AppError(ErrorCode.INTERNAL_ERROR, "Failed to reject membership request") from e
