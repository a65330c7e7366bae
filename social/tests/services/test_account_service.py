from unittest.mock import MagicMock

from django.contrib.auth.hashers import check_password
from django.test import TestCase

from social.errors import Conflict, NotFound, ValidationFailed
from social.models import User
from social.services import AccountService, RelationshipService
from social.tokens import verify_token
from social.tests.helpers import make_user


class SignupTestCase(TestCase):
    def setUp(self):
        self.service = AccountService()
        self.existing = make_user(username="taken", email="taken@example.org")

    def test_signup_creates_basic_user_with_token(self):
        user = self.service.signup("Jane Doe", "jane", "jane@example.org", "secret1")
        self.assertEqual(user.role, User.ROLE_BASIC)
        self.assertTrue(check_password("secret1", user.password))
        payload = verify_token(user.token)
        self.assertEqual(payload["userId"], str(user.pk))
        self.assertEqual(payload["email"], "jane@example.org")

    def test_rejections_have_distinct_kinds_and_create_nothing(self):
        cases = [
            (("Jane", "jane", "not-an-email", "secret1"), "VALIDATION"),
            (("Jane", "jane", "taken@example.org", "secret1"), "CONFLICT"),
            (("Jane", "taken", "jane@example.org", "secret1"), "CONFLICT"),
            (("Jane", "jane", "jane@example.org", "abc"), "VALIDATION"),
        ]
        for args, kind in cases:
            with self.subTest(args=args):
                with self.assertRaises((ValidationFailed, Conflict)) as ctx:
                    self.service.signup(*args)
                self.assertEqual(ctx.exception.kind, kind)
        self.assertEqual(User.objects.count(), 1)

    def test_duplicate_messages_name_the_field(self):
        with self.assertRaisesMessage(Conflict, "Email is already taken"):
            self.service.signup("Jane", "jane", "TAKEN@example.org", "secret1")
        with self.assertRaisesMessage(Conflict, "Username is already taken"):
            self.service.signup("Jane", "taken", "jane@example.org", "secret1")

    def test_short_password_message(self):
        with self.assertRaisesMessage(ValidationFailed, "Password must be at least 6 characters long!"):
            self.service.signup("Jane", "jane", "jane@example.org", "12345")


class LoginTestCase(TestCase):
    def setUp(self):
        self.service = AccountService()
        self.user = make_user(email="john@example.org", password="Password123")

    def test_login_returns_user_with_token(self):
        user = self.service.login("john@example.org", "Password123")
        self.assertEqual(user, self.user)
        self.assertEqual(verify_token(user.token)["userId"], str(self.user.pk))

    def test_unknown_email(self):
        with self.assertRaisesMessage(NotFound, "User does not exist!"):
            self.service.login("nobody@example.org", "Password123")

    def test_wrong_password(self):
        with self.assertRaisesMessage(ValidationFailed, "Password is incorrect!"):
            self.service.login("john@example.org", "wrong-password")


class UpdateUserTestCase(TestCase):
    def setUp(self):
        self.media = MagicMock()
        self.media.replace.return_value = "/media/uploads/new.png"
        self.service = AccountService(media=self.media)
        self.user = make_user(username="john", fullname="John Doe", password="Password123")

    def test_absent_fields_keep_stored_values(self):
        user = self.service.update_user(self.user.pk, fullname="Johnny", username="", link=None)
        self.assertEqual(user.fullname, "Johnny")
        self.assertEqual(user.username, "john")

    def test_password_change_requires_both_values(self):
        with self.assertRaises(ValidationFailed):
            self.service.update_user(self.user.pk, new_password="newsecret")
        with self.assertRaises(ValidationFailed):
            self.service.update_user(self.user.pk, current_password="Password123")

    def test_password_change_checks_current_password(self):
        with self.assertRaisesMessage(ValidationFailed, "Current password is incorrect"):
            self.service.update_user(self.user.pk, current_password="nope", new_password="newsecret")

    def test_password_change(self):
        self.service.update_user(self.user.pk, current_password="Password123", new_password="newsecret")
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password("newsecret"))

    def test_new_password_length(self):
        with self.assertRaises(ValidationFailed):
            self.service.update_user(self.user.pk, current_password="Password123", new_password="abc")

    def test_email_format_and_uniqueness(self):
        make_user(email="other@example.org")
        with self.assertRaises(ValidationFailed):
            self.service.update_user(self.user.pk, email="bad")
        with self.assertRaises(Conflict):
            self.service.update_user(self.user.pk, email="other@example.org")

    def test_images_are_replaced_through_media_host(self):
        self.user.profile_img = "/media/uploads/old.png"
        self.user.save()
        user = self.service.update_user(self.user.pk, profile_img="aGVsbG8=")
        self.media.replace.assert_called_once_with("/media/uploads/old.png", "aGVsbG8=")
        self.assertEqual(user.profile_img, "/media/uploads/new.png")
        self.assertEqual(user.cover_img, "")


class UserLookupTestCase(TestCase):
    def setUp(self):
        self.service = AccountService()
        self.relationships = RelationshipService()
        self.alice = make_user()
        self.bob = make_user()
        self.cara = make_user()

    def test_fetch_missing(self):
        with self.assertRaises(NotFound):
            self.service.fetch("missing")

    def test_followers_and_following(self):
        self.relationships.follow_unfollow(self.alice.pk, self.bob.pk)
        self.assertEqual(self.service.followers(self.bob.pk), [self.alice])
        self.assertEqual(self.service.following(self.alice.pk), [self.bob])

    def test_suggested_excludes_self_and_followed(self):
        self.relationships.follow_unfollow(self.alice.pk, self.bob.pk)
        self.assertEqual(self.service.suggested(self.alice.pk), [self.cara])

    def test_list_all(self):
        self.assertEqual(len(self.service.list_all()), 3)
