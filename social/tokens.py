"""Signed, time-limited session tokens issued at signup and login."""

import logging

from django.conf import settings
from django.core import signing

logger = logging.getLogger(__name__)


def issue_token(user) -> str:
    """Return a signed token binding the user's id and email."""
    payload = {"userId": str(user.pk), "email": user.email}
    return signing.dumps(payload, salt=settings.SOCIAL_TOKEN_SALT, compress=True)


def verify_token(token: str) -> dict | None:
    """Return the token payload, or None when the token is forged or older than the max age."""
    try:
        return signing.loads(token, salt=settings.SOCIAL_TOKEN_SALT, max_age=settings.SOCIAL_TOKEN_MAX_AGE)
    except signing.SignatureExpired:
        logger.info("Rejected expired session token")
        return None
    except signing.BadSignature:
        logger.warning("Rejected session token with a bad signature")
        return None
