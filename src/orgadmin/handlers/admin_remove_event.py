"""Lambda resolver for the adminRemoveEvent mutation.

Deleting an event also removes it from every user list that points back at it:
- the creator's createdEvents, eventAdmin and registeredEvents
- eventAdmin of each event admin
- registeredEvents of each registrant
"""

from typing import Any, Dict, List, Set

from ..utils.appsync_types import get_argument, get_caller_id_required, get_tenant_id
from ..utils.auth import admin_check
from ..utils.documents import get_document, pull_from_lists
from ..utils.dynamodb import get_tables_for_tenant
from ..utils.errors import (
    EVENT_NOT_FOUND,
    ORGANIZATION_NOT_FOUND,
    USER_NOT_FOUND,
    AppError,
    ErrorCode,
    NotFoundError,
)
from ..utils.ids import ensure_event_id, ensure_user_id
from ..utils.logging import request_logger
from ..utils.responses import EventResponse, build_event_response

CREATOR_EVENT_LISTS = ("createdEvents", "eventAdmin", "registeredEvents")


def _event_back_references(event_item: Dict[str, Any]) -> Dict[str, Set[str]]:
    """Map each user that references the event to the list attributes holding it."""
    references: Dict[str, Set[str]] = {}

    creator_id = event_item.get("creatorId")
    if creator_id:
        references.setdefault(creator_id, set()).update(CREATOR_EVENT_LISTS)

    for admin_id in event_item.get("admins") or []:
        references.setdefault(admin_id, set()).add("eventAdmin")

    for registrant_id in event_item.get("registrants") or []:
        references.setdefault(registrant_id, set()).add("registeredEvents")

    return references


def lambda_handler(event: Dict[str, Any], context: Any) -> EventResponse:
    """
    Delete an event on behalf of an organization admin.

    GraphQL mutation: adminRemoveEvent(eventId: ID!)

    Returns:
        The event as it was before deletion

    Raises:
        NotFoundError: If the event, its organization or the caller is missing
        UnauthorizedError: If the caller is not an organization admin
    """
    logger = request_logger(__name__, event)
    caller_id = ensure_user_id(get_caller_id_required(event)) or ""
    event_id = ensure_event_id(get_argument(event, "eventId"))
    db = get_tables_for_tenant(get_tenant_id(event))

    logger.info("Admin removing event", eventId=event_id, callerId=caller_id)

    try:
        event_item = get_document(db.events, "eventId", event_id)
        if event_item is None:
            raise NotFoundError(EVENT_NOT_FOUND)

        organization = get_document(db.organizations, "organizationId", event_item.get("organizationId"))
        if organization is None:
            raise NotFoundError(ORGANIZATION_NOT_FOUND)

        current_user = get_document(db.users, "userId", caller_id)
        if current_user is None:
            raise NotFoundError(USER_NOT_FOUND)

        admin_check(caller_id, organization, db, user=current_user)

        pruned_users: List[str] = []
        for user_id, attributes in _event_back_references(event_item).items():
            updated = pull_from_lists(
                db.users,
                {"userId": user_id},
                {attribute: [event_item["eventId"]] for attribute in sorted(attributes)},
            )
            if updated is None:
                logger.warning("Referenced user not found, skipping", userId=user_id, eventId=event_id)
                continue
            pruned_users.append(user_id)

        db.events.delete_item(Key={"eventId": event_item["eventId"]})

        logger.info("Event removed by admin", eventId=event_id, usersUpdated=len(pruned_users))
        return build_event_response(event_item)

    except AppError as e:
        logger.warning("Event removal refused", errorCode=e.error_code, error=e.message)
        raise
    except Exception as e:
        logger.error("Failed to remove event", error=str(e))
        raise AppError(ErrorCode.INTERNAL_ERROR, "Failed to remove event") from e
