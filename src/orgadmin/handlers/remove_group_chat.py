"""Lambda resolver for the removeGroupChat mutation."""

from typing import Any, Dict

from ..utils.appsync_types import get_argument, get_caller_id_required, get_tenant_id
from ..utils.auth import admin_check
from ..utils.documents import delete_documents, get_document
from ..utils.dynamodb import get_tables_for_tenant
from ..utils.errors import CHAT_NOT_FOUND, ORGANIZATION_NOT_FOUND, AppError, ErrorCode, NotFoundError
from ..utils.ids import ensure_chat_id, ensure_user_id
from ..utils.logging import request_logger
from ..utils.responses import ChatResponse, build_chat_response


def lambda_handler(event: Dict[str, Any], context: Any) -> ChatResponse:
    """
    Delete a group chat and all of its messages.

    GraphQL mutation: removeGroupChat(chatId: ID!)

    Returns:
        The group chat as it was before deletion
    """
    logger = request_logger(__name__, event)
    caller_id = ensure_user_id(get_caller_id_required(event)) or ""
    chat_id = ensure_chat_id(get_argument(event, "chatId"))
    db = get_tables_for_tenant(get_tenant_id(event))

    logger.info("Removing group chat", chatId=chat_id, callerId=caller_id)

    try:
        group_chat = get_document(db.group_chats, "groupChatId", chat_id)
        if group_chat is None:
            raise NotFoundError(CHAT_NOT_FOUND)

        organization = get_document(db.organizations, "organizationId", group_chat.get("organizationId"))
        if organization is None:
            raise NotFoundError(ORGANIZATION_NOT_FOUND)

        admin_check(caller_id, organization, db)

        messages_deleted = delete_documents(db.group_chat_messages, "messageId", group_chat.get("messages") or [])
        db.group_chats.delete_item(Key={"groupChatId": group_chat["groupChatId"]})

        logger.info("Group chat removed", chatId=chat_id, messagesDeleted=messages_deleted)
        return build_chat_response(group_chat, "groupChatId")

    except AppError as e:
        logger.warning("Group chat removal refused", errorCode=e.error_code, error=e.message)
        raise
    except Exception as e:
        logger.error("Failed to remove group chat", error=str(e))
        raise AppError(ErrorCode.INTERNAL_ERROR, "Failed to remove group chat") from e
