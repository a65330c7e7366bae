"""Model representing follower→author relationships."""

from __future__ import annotations

from django.conf import settings
from django.db import models
from django.db.models import F, Q

from social.utils.ids import uuid7_or_4


class Follower(models.Model):
    """Follower relationship where follower subscribes to author.

    One row backs both mirror views: ``author.followers`` and
    ``follower.following``.
    """
    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)

    follower = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="following",      # user.following -> Follower rows this user created (outbound)
        db_column="follower_id",
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="followers",      # user.followers -> Follower rows pointing to this user (inbound)
        db_column="author_id",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """DB metadata and constraints for follower relationships."""
        db_table = "followers"
        constraints = [
            models.UniqueConstraint(fields=["follower", "author"], name="uniq_followers_follower_author"),
            models.CheckConstraint(condition=~Q(follower=F("author")), name="chk_followers_not_self"),
        ]
        indexes = [
            models.Index(fields=["follower"], name="followers_follower_idx"),
            models.Index(fields=["author"], name="followers_author_idx"),
        ]

    def __str__(self) -> str:
        """Readable representation for admin/debugging."""
        return f"Follower(follower={self.follower_id}, author={self.author_id})"
