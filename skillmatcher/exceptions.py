"""
Matching error taxonomy.

Raised by the matching facade and propagated unchanged to the caller.
Empty requirement sets, empty profiles and empty candidate pools are not
errors; they produce an empty result list.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable error codes for the presentation layer."""

    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class MatchingError(Exception):
    """Base class for errors raised by the matching engine."""

    error_code: ErrorCode

    def __init__(self, message: str, error_code: ErrorCode):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def to_dict(self) -> dict:
        return {"error_code": self.error_code.value, "error_message": self.message}


class EntryNotFound(MatchingError):
    """A referenced entity could not be resolved."""

    def __init__(self, resource: str, field: str, value: str, error_code: ErrorCode):
        super().__init__(
            f"{resource} with {field} '{value}' could not be found.",
            error_code,
        )
        self.resource = resource
        self.field = field
        self.value = value


class ProjectNotFound(EntryNotFound):
    """Raised when a project id does not resolve."""

    def __init__(self, project_id: str):
        super().__init__("Project", "id", project_id, ErrorCode.PROJECT_NOT_FOUND)


class UserNotFound(EntryNotFound):
    """Raised when a user id does not resolve."""

    def __init__(self, user_id: str):
        super().__init__("User", "id", user_id, ErrorCode.USER_NOT_FOUND)


class InvalidArgument(MatchingError):
    """Raised for caller bugs such as a non-positive result limit."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.INVALID_ARGUMENT)


__all__ = [
    "ErrorCode",
    "MatchingError",
    "EntryNotFound",
    "ProjectNotFound",
    "UserNotFound",
    "InvalidArgument",
]
