"""Single Lambda entry point routing AppSync mutations to their resolvers."""

from typing import Any, Callable, Dict

from ..utils.appsync_types import get_field_name
from ..utils.errors import AppError, ErrorCode, handle_error
from ..utils.logging import request_logger
from . import (
    admin_remove_event,
    admin_remove_group,
    reject_membership_request,
    remove_direct_chat,
    remove_group_chat,
    remove_member,
)

Resolver = Callable[[Dict[str, Any], Any], Any]

RESOLVERS: Dict[str, Resolver] = {
    "rejectMembershipRequest": reject_membership_request.lambda_handler,
    "removeDirectChat": remove_direct_chat.lambda_handler,
    "removeGroupChat": remove_group_chat.lambda_handler,
    "adminRemoveGroup": admin_remove_group.lambda_handler,
    "adminRemoveEvent": admin_remove_event.lambda_handler,
    "removeMember": remove_member.lambda_handler,
}


def lambda_handler(event: Dict[str, Any], context: Any) -> Any:
    """Route by info.fieldName."""
    logger = request_logger(__name__, event)
    field_name = get_field_name(event)

    resolver = RESOLVERS.get(field_name or "")
    if resolver is None:
        raise AppError(
            ErrorCode.INVALID_INPUT,
            f"No resolver registered for field {field_name!r}",
            {"fieldName": field_name},
        )

    try:
        return resolver(event, context)
    except Exception as e:
        error = handle_error(e)
        logger.error("Resolver failed", fieldName=field_name, errorCode=error["errorCode"], error=error["message"])
        raise
