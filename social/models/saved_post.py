"""Model for posts a user has saved (one-directional, no mirror list)."""

from django.conf import settings
from django.db import models

from social.utils.ids import uuid7_or_4


class SavedPost(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column="user_id",
        related_name="saved_posts",
    )
    post = models.ForeignKey(
        "social.Post",
        on_delete=models.CASCADE,
        db_column="post_id",
        related_name="saves",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "saved_post"
        constraints = [
            models.UniqueConstraint(fields=["user", "post"], name="uniq_saved_post_user_post"),
        ]

    def __str__(self):
        return f"SavedPost(user={self.user_id}, post={self.post_id})"
