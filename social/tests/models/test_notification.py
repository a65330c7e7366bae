from django.test import TestCase

from social.models import Notification
from social.tests.helpers import make_user


class NotificationModelTestCase(TestCase):
    def test_defaults_to_unread(self):
        note = Notification.objects.create(
            sender=make_user(), recipient=make_user(), notification_type=Notification.TYPE_FOLLOW
        )
        self.assertFalse(note.is_read)
        self.assertIsNotNone(note.created_at)
