"""Repository helpers for user lookups and relationship lists."""

from typing import List

from social.db_accessor import DB_Accessor
from social.models import Follower, Like, SavedPost, User


class UserRepo(DB_Accessor):
    """Repository for basic user queries."""

    list_fields = {
        "followers": (Follower, "author", "follower"),
        "following": (Follower, "follower", "author"),
        "likedPosts": (Like, "user", "post"),
        "savedPosts": (SavedPost, "user", "post"),
    }

    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def first_by_email(self, email: str):
        """Return the user with this email, or None."""
        return self.model.objects.filter(email__iexact=email).first()

    def first_by_username(self, username: str):
        """Return the user with this username, or None."""
        return self.model.objects.filter(username=username).first()

    def followers_of(self, user_id) -> List[User]:
        """Users following user_id."""
        return list(self.model.objects.filter(following__author_id=user_id).order_by("-following__created_at"))

    def following_of(self, user_id) -> List[User]:
        """Users that user_id follows."""
        return list(self.model.objects.filter(followers__follower_id=user_id).order_by("-followers__created_at"))

    def likers_of(self, post_id) -> List[User]:
        """Users that liked post_id."""
        return list(self.model.objects.filter(likes__post_id=post_id).order_by("-likes__created_at"))

    def sample_excluding(self, user_id, size: int) -> List[User]:
        """Return up to ``size`` random users other than user_id."""
        return list(self.model.objects.exclude(id=user_id).order_by("?")[:size])
