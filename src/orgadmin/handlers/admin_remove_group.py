"""Lambda resolver for the adminRemoveGroup mutation.

Unlike removeGroupChat, the caller must have a user record; a token for a
deleted account is rejected with USER_NOT_FOUND before the admin check.
"""

from typing import Any, Dict

from ..utils.appsync_types import get_argument, get_caller_id_required, get_tenant_id
from ..utils.auth import admin_check
from ..utils.documents import delete_documents, get_document
from ..utils.dynamodb import get_tables_for_tenant
from ..utils.errors import (
    CHAT_NOT_FOUND,
    ORGANIZATION_NOT_FOUND,
    USER_NOT_FOUND,
    AppError,
    ErrorCode,
    NotFoundError,
)
from ..utils.ids import ensure_chat_id, ensure_user_id
from ..utils.logging import request_logger
from ..utils.responses import ChatResponse, build_chat_response


def lambda_handler(event: Dict[str, Any], context: Any) -> ChatResponse:
    """
    Delete a group chat on behalf of an organization admin.

    GraphQL mutation: adminRemoveGroup(groupId: ID!)

    Returns:
        The group chat as it was before deletion
    """
    logger = request_logger(__name__, event)
    caller_id = ensure_user_id(get_caller_id_required(event)) or ""
    group_id = ensure_chat_id(get_argument(event, "groupId"))
    db = get_tables_for_tenant(get_tenant_id(event))

    logger.info("Admin removing group", groupId=group_id, callerId=caller_id)

    try:
        group = get_document(db.group_chats, "groupChatId", group_id)
        if group is None:
            raise NotFoundError(CHAT_NOT_FOUND)

        organization = get_document(db.organizations, "organizationId", group.get("organizationId"))
        if organization is None:
            raise NotFoundError(ORGANIZATION_NOT_FOUND)

        current_user = get_document(db.users, "userId", caller_id)
        if current_user is None:
            raise NotFoundError(USER_NOT_FOUND)

        admin_check(caller_id, organization, db, user=current_user)

        messages_deleted = delete_documents(db.group_chat_messages, "messageId", group.get("messages") or [])
        db.group_chats.delete_item(Key={"groupChatId": group["groupChatId"]})

        logger.info("Group removed by admin", groupId=group_id, messagesDeleted=messages_deleted)
        return build_chat_response(group, "groupChatId")

    except AppError as e:
        logger.warning("Group removal refused", errorCode=e.error_code, error=e.message)
        raise
    except Exception as e:
        logger.error("Failed to remove group", error=str(e))
        raise AppError(ErrorCode.INTERNAL_ERROR, "Failed to remove group") from e
