"""
GraphQL response builders for Lambda resolvers.

Provides consistent response structures and entity builders for
AppSync GraphQL resolvers.
"""

from typing import Any, Dict, List, Optional, TypedDict, cast


class OrganizationResponse(TypedDict, total=False):
    """GraphQL Organization response type."""

    organizationId: str
    name: str
    description: Optional[str]
    isPublic: bool
    creatorId: str
    admins: List[str]
    members: List[str]
    membershipRequests: List[str]
    createdAt: str
    updatedAt: str


class MembershipRequestResponse(TypedDict, total=False):
    """GraphQL MembershipRequest response type."""

    membershipRequestId: str
    userId: str
    organizationId: str
    createdAt: str


class EventResponse(TypedDict, total=False):
    """GraphQL Event response type."""

    eventId: str
    title: str
    description: Optional[str]
    organizationId: str
    creatorId: str
    admins: List[str]
    registrants: List[str]
    status: str
    startDate: Optional[str]
    endDate: Optional[str]
    createdAt: str


class ChatResponse(TypedDict, total=False):
    """GraphQL GroupChat / DirectChat response type."""

    chatId: str
    title: Optional[str]
    organizationId: str
    creatorId: str
    users: List[str]
    messages: List[str]
    createdAt: str


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value]


def build_organization_response(item: Dict[str, Any]) -> OrganizationResponse:
    """
    Build an Organization response from a DynamoDB item.

    Args:
        item: DynamoDB item dictionary

    Returns:
        OrganizationResponse with normalized field names
    """
    return OrganizationResponse(
        organizationId=cast(str, item.get("organizationId", "")),
        name=cast(str, item.get("name", "")),
        description=item.get("description"),
        isPublic=bool(item.get("isPublic", False)),
        creatorId=cast(str, item.get("creatorId", "")),
        admins=_string_list(item.get("admins")),
        members=_string_list(item.get("members")),
        membershipRequests=_string_list(item.get("membershipRequests")),
        createdAt=cast(str, item.get("createdAt", "")),
        updatedAt=cast(str, item.get("updatedAt", "")),
    )


def build_membership_request_response(item: Dict[str, Any]) -> MembershipRequestResponse:
    """Build a MembershipRequest response from a DynamoDB item."""
    return MembershipRequestResponse(
        membershipRequestId=cast(str, item.get("membershipRequestId", "")),
        userId=cast(str, item.get("userId", "")),
        organizationId=cast(str, item.get("organizationId", "")),
        createdAt=cast(str, item.get("createdAt", "")),
    )


def build_event_response(item: Dict[str, Any]) -> EventResponse:
    """Build an Event response from a DynamoDB item."""
    return EventResponse(
        eventId=cast(str, item.get("eventId", "")),
        title=cast(str, item.get("title", "")),
        description=item.get("description"),
        organizationId=cast(str, item.get("organizationId", "")),
        creatorId=cast(str, item.get("creatorId", "")),
        admins=_string_list(item.get("admins")),
        registrants=_string_list(item.get("registrants")),
        status=cast(str, item.get("status", "ACTIVE")),
        startDate=item.get("startDate"),
        endDate=item.get("endDate"),
        createdAt=cast(str, item.get("createdAt", "")),
    )


def build_chat_response(item: Dict[str, Any], id_attribute: str) -> ChatResponse:
    """
    Build a chat response from a group chat or direct chat item.

    Args:
        item: DynamoDB item dictionary
        id_attribute: Key attribute of the source table ("groupChatId" or "directChatId")

    Returns:
        ChatResponse with the table-specific key exposed as chatId
    """
    return ChatResponse(
        chatId=cast(str, item.get(id_attribute, "")),
        title=item.get("title"),
        organizationId=cast(str, item.get("organizationId", "")),
        creatorId=cast(str, item.get("creatorId", "")),
        users=_string_list(item.get("users")),
        messages=_string_list(item.get("messages")),
        createdAt=cast(str, item.get("createdAt", "")),
    )
