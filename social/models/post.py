"""Model for a user's post."""

from django.conf import settings
from django.db import models
from django.utils import timezone

from social.utils.ids import uuid7_or_4


class Post(models.Model):
    """Text post with an optional hosted image."""
    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="posts",
        db_column="user_id",
    )
    content = models.TextField()
    image_url = models.CharField(max_length=500, blank=True, default="")
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "post"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="post_user_created_idx"),
        ]

    def __str__(self):
        return f"Post by {self.user_id}"

    @property
    def liker_ids(self):
        return list(self.likes.values_list("user_id", flat=True))
