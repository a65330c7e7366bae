"""Identity descriptor derived from an inbound request.

Operations receive an ``Identity`` explicitly; nothing downstream inspects the
request to decide who the caller is.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from rest_framework import exceptions

logger = logging.getLogger(__name__)

ANONYMOUS_ROLE = "ANONYMOUS"


@dataclass(frozen=True)
class Identity:
    authenticated: bool
    role: str
    user_id: Optional[str] = None

    @classmethod
    def anonymous(cls):
        return cls(authenticated=False, role=ANONYMOUS_ROLE)

    @classmethod
    def for_user(cls, user):
        return cls(authenticated=True, role=user.role, user_id=str(user.pk))


def identity_for(request) -> Identity:
    """Build the caller's identity from the user the authentication classes resolve.

    A rejected credential yields the anonymous identity; the authorization
    gate then reports it as unauthenticated.
    """
    try:
        user = getattr(request, "user", None)
    except exceptions.AuthenticationFailed as exc:
        logger.warning("Authentication failed: %s", exc.detail)
        return Identity.anonymous()
    if user is None or not getattr(user, "is_authenticated", False):
        return Identity.anonymous()
    if not getattr(user, "is_active", True):
        return Identity.anonymous()
    return Identity.for_user(user)
