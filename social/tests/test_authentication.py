from unittest.mock import MagicMock, patch

from django.test import TestCase
from rest_framework import exceptions

from social.authentication import FirebaseAuthentication, SignedTokenAuthentication
from social.identity import Identity, identity_for
from social.tests.helpers import make_user
from social.tokens import issue_token


class SignedTokenAuthenticationTests(TestCase):
    def setUp(self):
        self.auth = SignedTokenAuthentication()
        self.request = MagicMock()
        self.user = make_user(email="u@example.org")

    def test_authenticate_success(self):
        self.request.META = {'HTTP_AUTHORIZATION': f'Bearer {issue_token(self.user)}'}
        user, payload = self.auth.authenticate(self.request)
        self.assertEqual(user, self.user)
        self.assertEqual(payload["email"], "u@example.org")

    def test_authenticate_no_header(self):
        self.request.META = {}
        self.assertIsNone(self.auth.authenticate(self.request))

    def test_non_signed_token_is_left_to_other_backends(self):
        self.request.META = {'HTTP_AUTHORIZATION': 'Bearer firebase-id-token'}
        self.assertIsNone(self.auth.authenticate(self.request))

    def test_forged_token(self):
        self.request.META = {'HTTP_AUTHORIZATION': 'Bearer abc:def:ghi'}
        with self.assertRaises(exceptions.AuthenticationFailed):
            self.auth.authenticate(self.request)

    def test_token_for_deleted_user(self):
        token = issue_token(self.user)
        self.user.delete()
        self.request.META = {'HTTP_AUTHORIZATION': f'Bearer {token}'}
        with self.assertRaises(exceptions.AuthenticationFailed):
            self.auth.authenticate(self.request)

    def test_token_after_email_change(self):
        token = issue_token(self.user)
        self.user.email = "new@example.org"
        self.user.save()
        self.request.META = {'HTTP_AUTHORIZATION': f'Bearer {token}'}
        with self.assertRaises(exceptions.AuthenticationFailed):
            self.auth.authenticate(self.request)

    def test_authenticate_header(self):
        self.assertEqual(self.auth.authenticate_header(self.request), 'Bearer')


class FirebaseAuthenticationTests(TestCase):
    def setUp(self):
        self.auth = FirebaseAuthentication()
        self.request = MagicMock()
        self.user = make_user(email='u@e.com')

    @patch('social.authentication.auth.verify_id_token')
    def test_authenticate_success(self, mock_verify):
        self.request.META = {'HTTP_AUTHORIZATION': 'Bearer token123'}
        mock_verify.return_value = {'uid': 'user1', 'email': 'u@e.com'}
        user, _ = self.auth.authenticate(self.request)
        self.assertEqual(user, self.user)

    def test_authenticate_no_header(self):
        self.request.META = {}
        self.assertIsNone(self.auth.authenticate(self.request))

    @patch('social.authentication.auth.verify_id_token')
    def test_authenticate_invalid_token(self, mock_verify):
        self.request.META = {'HTTP_AUTHORIZATION': 'Bearer bad'}
        mock_verify.side_effect = Exception("Boom")
        with self.assertRaises(exceptions.AuthenticationFailed):
            self.auth.authenticate(self.request)

    @patch('social.authentication.auth.verify_id_token')
    def test_authenticate_unknown_email(self, mock_verify):
        self.request.META = {'HTTP_AUTHORIZATION': 'Bearer token123'}
        mock_verify.return_value = {'uid': 'user2', 'email': 'missing@e.com'}
        with self.assertRaises(exceptions.AuthenticationFailed):
            self.auth.authenticate(self.request)


class RejectingRequest:
    @property
    def user(self):
        raise exceptions.AuthenticationFailed("bad")


class IdentityResolverTests(TestCase):
    def test_authenticated_user(self):
        user = make_user(role="ADMIN")
        request = MagicMock(user=user)
        self.assertEqual(identity_for(request), Identity(True, "ADMIN", str(user.pk)))

    def test_rejected_credentials_are_anonymous(self):
        self.assertEqual(identity_for(RejectingRequest()), Identity.anonymous())

    def test_inactive_user_is_anonymous(self):
        user = make_user(is_active=False)
        self.assertFalse(identity_for(MagicMock(user=user)).authenticated)

    def test_missing_user_is_anonymous(self):
        self.assertEqual(identity_for(MagicMock(user=None)), Identity.anonymous())
