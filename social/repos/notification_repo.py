"""Repository helpers for notifications."""

from typing import List

from social.db_accessor import DB_Accessor
from social.models import Notification


class NotificationRepo(DB_Accessor):
    """Repository for Notification queries."""

    def __init__(self) -> None:
        super().__init__(Notification)

    def list_for_recipient(self, user_id) -> List[Notification]:
        """Notifications addressed to user_id, newest first, with senders loaded."""
        return list(
            self.model.objects.filter(recipient_id=user_id)
            .select_related("sender")
            .order_by("-created_at", "-id")
        )

    def mark_read(self, ids) -> int:
        """Mark the given notifications as read; return count updated."""
        return self.model.objects.filter(id__in=list(ids), is_read=False).update(is_read=True)

    def delete_involving(self, user_id) -> int:
        """Delete notifications sent by or addressed to user_id."""
        count = self.delete(recipient_id=user_id)
        count += self.delete(sender_id=user_id)
        return count
