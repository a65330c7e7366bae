"""Custom user model with profile fields, role, and derived relationship views."""

from django.contrib.auth.models import AbstractUser
from django.db import models

from social.utils.ids import uuid7_or_4


class User(AbstractUser):
    """Account holder. Relationship lists are derived from the edge tables."""

    ROLE_BASIC = "BASIC"
    ROLE_ADMIN = "ADMIN"

    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)
    username = models.CharField(max_length=150, unique=True)
    email = models.EmailField(unique=True, blank=False)
    fullname = models.CharField(max_length=150)
    role = models.CharField(max_length=20, default=ROLE_BASIC)
    link = models.CharField(max_length=500, blank=True, default="")
    profile_img = models.CharField(max_length=500, blank=True, default="")
    cover_img = models.CharField(max_length=500, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Newest accounts first."""
        ordering = ["-created_at"]

    def __str__(self):
        return self.username

    @property
    def is_admin(self):
        return self.role == self.ROLE_ADMIN

    # Derived views over the relationship tables.
    @property
    def follower_ids(self):
        return list(self.followers.values_list("follower_id", flat=True))

    @property
    def following_ids(self):
        return list(self.following.values_list("author_id", flat=True))

    @property
    def liked_post_ids(self):
        return list(self.likes.order_by("-created_at").values_list("post_id", flat=True))

    @property
    def saved_post_ids(self):
        return list(self.saved_posts.order_by("-created_at").values_list("post_id", flat=True))

    @property
    def post_ids(self):
        return list(self.posts.values_list("id", flat=True))
