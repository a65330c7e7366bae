"""Service helpers for signup, login, profile updates and user lookups."""

import logging
import re

from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password
from django.db import IntegrityError, transaction

from social.errors import Conflict, NotFound, ValidationFailed
from social.media import MediaHost
from social.repos.user_repo import UserRepo
from social.tokens import issue_token

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


class AccountService:
    """Encapsulate account lifecycle and user lookups."""

    def __init__(self, repo=None, media=None):
        self.repo = repo or UserRepo()
        self.media = media or MediaHost()

    # --- credentials -----------------------------------------------------
    def signup(self, fullname, username, email, password):
        """Validate and create a BASIC user; the returned user carries a fresh token."""
        if not EMAIL_RE.match(email or ""):
            raise ValidationFailed("Invalid email format")
        if self.repo.first_by_email(email):
            raise Conflict("Email is already taken")
        if self.repo.first_by_username(username):
            raise Conflict("Username is already taken")
        if len(password or "") < MIN_PASSWORD_LENGTH:
            raise ValidationFailed("Password must be at least 6 characters long!")

        try:
            with transaction.atomic():
                user = self.repo.create(
                    fullname=fullname,
                    username=username,
                    email=email,
                    password=make_password(password),
                )
        except IntegrityError:
            raise Conflict("Email or username is already taken")
        logger.info("Signed up user %s", user.pk)
        user.token = issue_token(user)
        return user

    def login(self, email, password):
        """Check credentials and return the user with a fresh token."""
        user = self.repo.first_by_email(email or "")
        if user is None:
            raise NotFound("User does not exist!")
        if not check_password(password, user.password):
            raise ValidationFailed("Password is incorrect!")
        user.token = issue_token(user)
        return user

    # --- profile ---------------------------------------------------------
    def update_user(
        self,
        user_id,
        *,
        fullname=None,
        username=None,
        email=None,
        current_password=None,
        new_password=None,
        profile_img=None,
        cover_img=None,
        link=None,
    ):
        """Apply a profile patch; absent or empty values keep the stored value."""
        user = self.repo.get_by_id(user_id)

        if bool(current_password) != bool(new_password):
            raise ValidationFailed("Please provide both current password and new password")
        if current_password and new_password:
            if not check_password(current_password, user.password):
                raise ValidationFailed("Current password is incorrect")
            if len(new_password) < MIN_PASSWORD_LENGTH:
                raise ValidationFailed("Password must be at least 6 characters long")
            user.password = make_password(new_password)

        if email and not EMAIL_RE.match(email):
            raise ValidationFailed("Invalid email format")
        self._ensure_unique(user, email=email, username=username)

        if profile_img:
            profile_img = self.media.replace(user.profile_img, profile_img)
        if cover_img:
            cover_img = self.media.replace(user.cover_img, cover_img)

        user.email = email or user.email
        user.fullname = fullname or user.fullname
        user.username = username or user.username
        user.link = link or user.link
        user.profile_img = profile_img or user.profile_img
        user.cover_img = cover_img or user.cover_img
        user.save()
        return user

    def _ensure_unique(self, user, *, email, username):
        if email:
            other = self.repo.first_by_email(email)
            if other is not None and other.pk != user.pk:
                raise Conflict("Email is already taken")
        if username:
            other = self.repo.first_by_username(username)
            if other is not None and other.pk != user.pk:
                raise Conflict("Username is already taken")

    # --- lookups ---------------------------------------------------------
    def fetch(self, user_id):
        """Fetch a user by id or raise NotFound."""
        return self.repo.get_by_id(user_id)

    def list_all(self):
        return list(self.repo.list(order_by=("-created_at",)))

    def followers(self, user_id):
        user = self.repo.get_by_id(user_id)
        return self.repo.followers_of(user.pk)

    def following(self, user_id):
        user = self.repo.get_by_id(user_id)
        return self.repo.following_of(user.pk)

    def suggested(self, user_id):
        """A few random users the given user does not follow yet."""
        user = self.repo.get_by_id(user_id)
        followed = set(self.repo.list_values(user.pk, "following"))
        sample = self.repo.sample_excluding(user.pk, settings.SOCIAL_SUGGESTED_SAMPLE_SIZE)
        return [u for u in sample if u.pk not in followed][: settings.SOCIAL_SUGGESTED_LIMIT]
