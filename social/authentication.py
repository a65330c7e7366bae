import logging

from firebase_admin import auth
from django.contrib.auth import get_user_model
from rest_framework import authentication
from rest_framework import exceptions

from .firebase_admin_client import get_app
from .tokens import verify_token

logger = logging.getLogger(__name__)
User = get_user_model()


def _bearer_token(request):
    auth_header = request.META.get('HTTP_AUTHORIZATION')
    if not auth_header:
        return None
    return auth_header.split(' ').pop()


class SignedTokenAuthentication(authentication.BaseAuthentication):
    """DRF authentication backend validating tokens issued by signup/login."""

    keyword = 'Bearer'

    def authenticate(self, request):
        """Validate Authorization header token and return (user, payload)."""
        token = _bearer_token(request)
        # Signed tokens are colon-separated; anything else belongs to another backend.
        if not token or ':' not in token:
            return None

        payload = verify_token(token)
        if payload is None:
            raise exceptions.AuthenticationFailed('Invalid or expired token')

        user = User.objects.filter(pk=payload.get("userId"), is_active=True).first()
        if user is None or user.email != payload.get("email"):
            raise exceptions.AuthenticationFailed('User not found')
        return (user, payload)

    def authenticate_header(self, request):
        return self.keyword


class FirebaseAuthentication(authentication.BaseAuthentication):
    """DRF authentication backend validating Firebase ID tokens."""

    def authenticate(self, request):
        """Validate Authorization header token and return (user, auth)."""
        id_token = _bearer_token(request)
        if not id_token:
            return None

        try:
            get_app()
            decoded_token = auth.verify_id_token(id_token)
        except Exception as exc:
            logger.warning("Firebase token rejected: %s", exc)
            raise exceptions.AuthenticationFailed('Invalid Firebase token')

        email = decoded_token.get("email")
        user = User.objects.filter(email__iexact=email).first() if email else None
        if user is None:
            raise exceptions.AuthenticationFailed('User not found')
        return (user, None)
