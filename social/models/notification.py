from django.conf import settings
from django.db import models
from django.utils import timezone

from social.utils.ids import uuid7_or_4

"""
Notification model

In-app notifications for users, created only as a side effect of a follow,
like, or comment.

- `sender`: who performed the action (exposed as `from`)
- `recipient`: who is notified (exposed as `to`)
- `notification_type`: follow / like / comment
- `is_read`: flipped to True when the recipient lists their notifications
- Ordered newest-first.
"""


class Notification(models.Model):
    TYPE_FOLLOW = "follow"
    TYPE_LIKE = "like"
    TYPE_COMMENT = "comment"

    TYPES = [
        (TYPE_FOLLOW, "Follow"),
        (TYPE_LIKE, "Like"),
        (TYPE_COMMENT, "Comment"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)
    sender = models.ForeignKey(settings.AUTH_USER_MODEL, related_name="sent_notifications", on_delete=models.CASCADE)
    recipient = models.ForeignKey(settings.AUTH_USER_MODEL, related_name="notifications", on_delete=models.CASCADE)
    notification_type = models.CharField(max_length=20, choices=TYPES)

    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "notification"
        ordering = ["-created_at"]

    def __str__(self):
        return f"Notification for {self.recipient_id}: {self.notification_type}"
