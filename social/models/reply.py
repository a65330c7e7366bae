"""Model for replies to comments."""

from django.conf import settings
from django.db import models
from django.utils import timezone

from social.utils.ids import uuid7_or_4


class Reply(models.Model):
    """Reply to a comment; also keyed by the comment's post."""
    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)

    post = models.ForeignKey(
        "social.Post",
        on_delete=models.CASCADE,
        db_column="post_id",
        related_name="replies",
    )
    comment = models.ForeignKey(
        "social.Comment",
        on_delete=models.CASCADE,
        db_column="comment_id",
        related_name="replies",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column="user_id",
        related_name="replies",
    )

    content = models.TextField()
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "reply"
        ordering = ["created_at"]

    def __str__(self):
        return f"Reply by {self.user_id} on {self.comment_id}"
