"""
Error handling utilities for Lambda functions.

Provides standardized error responses with error codes, plus the catalogue of
domain errors raised by the mutation resolvers.
"""

from typing import Any, Dict, NamedTuple, Optional


class AppError(Exception):
    """
    Application error with error code and message.

    Used to return structured errors to GraphQL clients.
    """

    def __init__(self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for GraphQL response."""
        return {
            "errorCode": self.error_code,
            "message": self.message,
            **self.details,
        }


# Common error codes
class ErrorCode:
    """Standard error codes for the application."""

    # Authorization errors
    UNAUTHORIZED = "UNAUTHORIZED"

    # Resource errors
    NOT_FOUND = "NOT_FOUND"

    # Validation errors
    INVALID_INPUT = "INVALID_INPUT"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorMessage(NamedTuple):
    """A domain error: human readable message, client message key, offending param."""

    message: str
    code: str
    param: str


USER_NOT_FOUND = ErrorMessage("User not found", "user.notFound", "user")
ORGANIZATION_NOT_FOUND = ErrorMessage("Organization not found", "organization.notFound", "organization")
EVENT_NOT_FOUND = ErrorMessage("Event not found", "event.notFound", "event")
CHAT_NOT_FOUND = ErrorMessage("Chat not found", "chat.notFound", "chat")
MEMBERSHIP_REQUEST_NOT_FOUND = ErrorMessage(
    "Membership request not found", "membershipRequest.notFound", "membershipRequest"
)
MEMBER_NOT_FOUND = ErrorMessage("Member not found", "member.notFound", "member")
USER_NOT_AUTHORIZED_ADMIN = ErrorMessage(
    "Error: Current user must be an ADMIN", "role.notValid.admin", "roleValidationAdmin"
)
ADMIN_CANNOT_REMOVE_ADMIN = ErrorMessage(
    "Administrators cannot remove members who are also Administrators",
    "user.notAuthorized",
    "userAuthorization",
)
ADMIN_CANNOT_REMOVE_CREATOR = ErrorMessage(
    "Administrators cannot remove the creator of the organization from the organization",
    "user.notAuthorized",
    "userAuthorization",
)


class NotFoundError(AppError):
    """A referenced document does not exist."""

    def __init__(self, error: ErrorMessage) -> None:
        super().__init__(ErrorCode.NOT_FOUND, error.message, {"messageKey": error.code, "param": error.param})


class UnauthorizedError(AppError):
    """The caller is not allowed to perform the mutation."""

    def __init__(self, error: ErrorMessage) -> None:
        super().__init__(ErrorCode.UNAUTHORIZED, error.message, {"messageKey": error.code, "param": error.param})


def handle_error(error: Exception) -> Dict[str, Any]:
    """
    Convert exception to standardized error response.

    Args:
        error: Exception to handle

    Returns:
        Error dictionary for GraphQL response
    """
    if isinstance(error, AppError):
        return error.to_dict()

    # Unexpected error - return generic message
    return {
        "errorCode": ErrorCode.INTERNAL_ERROR,
        "message": "An unexpected error occurred. Please try again.",
    }
