"""Error taxonomy surfaced to API callers.

Each error carries a stable ``kind`` so callers can tell an authentication
failure from a missing entity without parsing the message.
"""


class SocialError(Exception):
    """Base class for failures that terminate an operation."""

    kind = "ERROR"
    default_message = "Operation failed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def as_dict(self):
        return {"message": self.message, "kind": self.kind}


class Unauthenticated(SocialError):
    kind = "UNAUTHENTICATED"
    default_message = "You are not Authenticated"


class Forbidden(SocialError):
    kind = "FORBIDDEN"
    default_message = "Not allowed"


class NotFound(SocialError):
    kind = "NOT_FOUND"
    default_message = "Not found"


class ValidationFailed(SocialError):
    kind = "VALIDATION"
    default_message = "Invalid input"


class Conflict(SocialError):
    kind = "CONFLICT"
    default_message = "Already exists"


class BadRequest(SocialError):
    kind = "BAD_REQUEST"
    default_message = "Malformed request"
