"""Cascading deletes for users, posts, comments and replies.

Each delete runs in a single transaction: dependents are removed first and
the primary entity is only reported deleted once every step has succeeded.
A failure part way rolls the whole delete back.
"""

import logging

from django.db import transaction

from social.models import Like, SavedPost
from social.repos.comment_repo import CommentRepo, ReplyRepo
from social.repos.followers_repo import FollowersRepo
from social.repos.notification_repo import NotificationRepo
from social.repos.post_repo import PostRepo
from social.repos.user_repo import UserRepo

logger = logging.getLogger(__name__)


class CascadeService:
    """Delete an entity together with everything that depends on it."""

    def __init__(self):
        self.users = UserRepo()
        self.posts = PostRepo()
        self.comments = CommentRepo()
        self.replies = ReplyRepo()
        self.followers = FollowersRepo()
        self.notifications = NotificationRepo()

    @transaction.atomic
    def delete_reply(self, reply_id):
        """Delete a reply; its comment's reply list is derived and needs no update."""
        return self.replies.delete_by_id(reply_id)

    @transaction.atomic
    def delete_comment(self, comment_id):
        """Delete a comment and all of its replies."""
        comment = self.comments.get_by_id(comment_id)
        removed = self.replies.delete(comment_id=comment.pk)
        logger.debug("Comment %s: removed %d replies", comment.pk, removed)
        return self.comments.delete_by_id(comment.pk)

    @transaction.atomic
    def delete_post(self, post_id):
        """Delete a post, its comments (with their replies), stray replies, and like/save edges."""
        post = self.posts.get_by_id(post_id)
        comment_ids = self.comments.ids_for(post_id=post.pk)
        for comment_id in comment_ids:
            self.delete_comment(comment_id)
        stray_replies = self.replies.delete(post_id=post.pk)
        Like.objects.filter(post_id=post.pk).delete()
        SavedPost.objects.filter(post_id=post.pk).delete()
        logger.info(
            "Post %s: removed %d comments and %d stray replies",
            post.pk, len(comment_ids), stray_replies,
        )
        return self.posts.delete_by_id(post.pk)

    @transaction.atomic
    def delete_user(self, user_id):
        """Delete a user and everything they own or appear in.

        Posts cascade per delete_post, comments on other users' posts per
        delete_comment. Follow/like/save edges and notifications involving the
        user are removed so no list keeps pointing at a deleted account.
        """
        user = self.users.get_by_id(user_id)
        post_ids = list(self.posts.list_for_user(user.pk).values_list("id", flat=True))
        for post_id in post_ids:
            self.delete_post(post_id)
        comment_ids = self.comments.ids_for(user_id=user.pk)
        for comment_id in comment_ids:
            self.delete_comment(comment_id)
        reply_count = self.replies.delete(user_id=user.pk)
        edge_count = self.followers.drop_edges_for_user(user.pk)
        notification_count = self.notifications.delete_involving(user.pk)
        logger.info(
            "User %s: removed %d posts, %d comments, %d replies, %d edges, %d notifications",
            user.pk, len(post_ids), len(comment_ids), reply_count, edge_count, notification_count,
        )
        return self.users.delete_by_id(user.pk)
