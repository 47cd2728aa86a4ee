"""Lambda resolver for the removeDirectChat mutation."""

from typing import Any, Dict

from ..utils.appsync_types import get_argument, get_caller_id_required, get_tenant_id
from ..utils.auth import admin_check
from ..utils.documents import delete_documents, get_document
from ..utils.dynamodb import get_tables_for_tenant
from ..utils.errors import CHAT_NOT_FOUND, ORGANIZATION_NOT_FOUND, AppError, ErrorCode, NotFoundError
from ..utils.ids import ensure_chat_id, ensure_organization_id, ensure_user_id
from ..utils.logging import request_logger
from ..utils.responses import ChatResponse, build_chat_response


def lambda_handler(event: Dict[str, Any], context: Any) -> ChatResponse:
    """
    Delete a direct chat and all of its messages.

    GraphQL mutation: removeDirectChat(chatId: ID!, organizationId: ID!)

    The organization is resolved before the chat, so an unknown organization
    is reported even when the chat ID is also bad. The chat must belong to
    that organization, so admins of one organization cannot reach another's
    chats.

    Returns:
        The direct chat as it was before deletion
    """
    logger = request_logger(__name__, event)
    caller_id = ensure_user_id(get_caller_id_required(event)) or ""
    chat_id = ensure_chat_id(get_argument(event, "chatId"))
    organization_id = ensure_organization_id(get_argument(event, "organizationId"))
    db = get_tables_for_tenant(get_tenant_id(event))

    logger.info("Removing direct chat", chatId=chat_id, organizationId=organization_id, callerId=caller_id)

    try:
        organization = get_document(db.organizations, "organizationId", organization_id)
        if organization is None:
            raise NotFoundError(ORGANIZATION_NOT_FOUND)

        direct_chat = get_document(db.direct_chats, "directChatId", chat_id)
        # A chat outside the named organization is reported as missing
        if direct_chat is None or direct_chat.get("organizationId") != organization["organizationId"]:
            raise NotFoundError(CHAT_NOT_FOUND)

        admin_check(caller_id, organization, db)

        messages_deleted = delete_documents(db.direct_chat_messages, "messageId", direct_chat.get("messages") or [])
        db.direct_chats.delete_item(Key={"directChatId": direct_chat["directChatId"]})

        logger.info("Direct chat removed", chatId=chat_id, messagesDeleted=messages_deleted)
        return build_chat_response(direct_chat, "directChatId")

    except AppError as e:
        logger.warning("Direct chat removal refused", errorCode=e.error_code, error=e.message)
        raise
    except Exception as e:
        logger.error("Failed to remove direct chat", error=str(e))
        raise AppError(ErrorCode.INTERNAL_ERROR, "Failed to remove direct chat") from e
