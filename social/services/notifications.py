"""Service helpers for creating, listing and clearing notifications."""

import logging

from social.models import Notification
from social.repos.notification_repo import NotificationRepo
from social.utils.ids import same_id

logger = logging.getLogger(__name__)


class NotificationService:
    """Encapsulate notification dispatch and read-on-list semantics."""

    KINDS = {Notification.TYPE_FOLLOW, Notification.TYPE_LIKE, Notification.TYPE_COMMENT}

    def __init__(self, repo=None):
        self.repo = repo or NotificationRepo()

    def notify(self, sender_id, recipient_id, kind):
        """Create a notification unless the actor is notifying themselves."""
        if kind not in self.KINDS:
            raise ValueError(f"Unknown notification kind {kind!r}")
        if same_id(sender_id, recipient_id):
            return None
        notification = self.repo.create(sender_id=sender_id, recipient_id=recipient_id, notification_type=kind)
        logger.debug("Notified %s of %s from %s", recipient_id, kind, sender_id)
        return notification

    def list_for_user(self, user_id):
        """Return the user's notifications newest first, then mark all of them read.

        The returned objects reflect their state before this call.
        """
        notifications = self.repo.list_for_recipient(user_id)
        if notifications:
            self.repo.mark_read(n.id for n in notifications)
        return notifications

    def delete_all_for_user(self, user_id):
        """Delete every notification addressed to the user; True only if any existed."""
        deleted = self.repo.delete(recipient_id=user_id)
        return deleted > 0
