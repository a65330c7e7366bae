"""Model representing a user's like on a post."""

from django.conf import settings
from django.db import models

from social.utils.ids import uuid7_or_4


class Like(models.Model):
    """User like on a post; backs both ``user.likes`` and ``post.likes``."""
    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column="user_id",
        related_name="likes",
    )

    post = models.ForeignKey(
        "social.Post",
        on_delete=models.CASCADE,
        db_column="post_id",
        related_name="likes",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Enforce one like per user/post pair."""
        db_table = "like"
        constraints = [
            models.UniqueConstraint(fields=["user", "post"], name="uniq_like_user_post"),
        ]

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.user_id} → {self.post_id}"
