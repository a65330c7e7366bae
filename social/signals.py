from django.db.models.signals import post_save
from django.dispatch import receiver

from social.models import Comment, Follower, Like, Notification
from social.services.notifications import NotificationService

notification_service = NotificationService()


@receiver(post_save, sender=Follower)
def notify_on_follow(sender, instance, created, **kwargs):
    """Create a notification when a user starts following an author."""
    if created:
        notification_service.notify(instance.follower_id, instance.author_id, Notification.TYPE_FOLLOW)


@receiver(post_save, sender=Like)
def notify_on_like(sender, instance, created, **kwargs):
    """Create a notification when a post is liked by someone other than its author."""
    if created:
        notification_service.notify(instance.user_id, instance.post.user_id, Notification.TYPE_LIKE)


@receiver(post_save, sender=Comment)
def notify_on_comment(sender, instance, created, **kwargs):
    """Create a notification when someone other than the author comments on a post."""
    if created:
        notification_service.notify(instance.user_id, instance.post.user_id, Notification.TYPE_COMMENT)
