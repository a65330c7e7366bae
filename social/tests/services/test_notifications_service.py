from datetime import timedelta

from django.test import TestCase
from django.utils import timezone

from social.models import Notification
from social.services import NotificationService
from social.tests.helpers import make_user


class NotificationServiceTestCase(TestCase):
    def setUp(self):
        self.service = NotificationService()
        self.alice = make_user()
        self.bob = make_user()

    def test_notify_creates_unread_notification(self):
        note = self.service.notify(self.alice.pk, self.bob.pk, Notification.TYPE_LIKE)
        self.assertEqual(note.recipient_id, self.bob.pk)
        self.assertFalse(note.is_read)

    def test_notify_self_is_skipped(self):
        self.assertIsNone(self.service.notify(self.alice.pk, str(self.alice.pk), Notification.TYPE_FOLLOW))
        self.assertFalse(Notification.objects.exists())

    def test_notify_rejects_unknown_kind(self):
        with self.assertRaises(ValueError):
            self.service.notify(self.alice.pk, self.bob.pk, "poke")

    def test_list_returns_newest_first_then_marks_read(self):
        now = timezone.now()
        for minutes in (30, 20, 10):
            Notification.objects.create(
                sender=self.alice,
                recipient=self.bob,
                notification_type=Notification.TYPE_FOLLOW,
                created_at=now - timedelta(minutes=minutes),
            )

        first = self.service.list_for_user(self.bob.pk)
        self.assertEqual(len(first), 3)
        self.assertEqual([n.created_at for n in first], sorted((n.created_at for n in first), reverse=True))
        self.assertTrue(all(not n.is_read for n in first))

        second = self.service.list_for_user(self.bob.pk)
        self.assertEqual(len(second), 3)
        self.assertTrue(all(n.is_read for n in second))

    def test_list_empty(self):
        self.assertEqual(self.service.list_for_user(self.alice.pk), [])

    def test_delete_all_reports_whether_anything_was_deleted(self):
        self.service.notify(self.alice.pk, self.bob.pk, Notification.TYPE_FOLLOW)
        self.assertTrue(self.service.delete_all_for_user(self.bob.pk))
        self.assertFalse(self.service.delete_all_for_user(self.bob.pk))
