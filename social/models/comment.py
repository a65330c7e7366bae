"""Model for comments on posts."""

from django.conf import settings
from django.db import models
from django.utils import timezone

from social.utils.ids import uuid7_or_4


class Comment(models.Model):
    """User-authored comment on a post."""
    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)

    # FK → post.id
    post = models.ForeignKey(
        "social.Post",
        on_delete=models.CASCADE,
        db_column="post_id",
        related_name="comments",
    )

    # FK → user.id
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column="user_id",
        related_name="comments",
    )

    content = models.TextField()
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "comment"
        ordering = ["-created_at"]

    def __str__(self):
        return f"Comment by {self.user_id} on {self.post_id}"

    @property
    def reply_ids(self):
        """Ids of replies whose comment is this one."""
        return list(self.replies.values_list("id", flat=True))
