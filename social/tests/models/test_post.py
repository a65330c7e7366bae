from datetime import timedelta

from django.test import TestCase
from django.utils import timezone

from social.models import Comment, Post, Reply
from social.tests.helpers import make_comment, make_post, make_reply, make_user


class PostModelTestCase(TestCase):
    def test_posts_are_ordered_newest_first(self):
        author = make_user()
        older = make_post(author=author, created_at=timezone.now() - timedelta(hours=1))
        newer = make_post(author=author)
        self.assertEqual(list(Post.objects.all()), [newer, older])

    def test_image_url_defaults_to_empty(self):
        self.assertEqual(make_post().image_url, "")

    def test_comment_reply_ids(self):
        comment = make_comment()
        reply = make_reply(comment=comment)
        self.assertEqual(comment.reply_ids, [reply.pk])
        self.assertEqual(reply.post_id, comment.post_id)

    def test_replies_are_ordered_oldest_first(self):
        comment = make_comment()
        first = make_reply(comment=comment)
        second = make_reply(comment=comment)
        Reply.objects.filter(pk=first.pk).update(created_at=timezone.now() - timedelta(minutes=5))
        self.assertEqual(list(comment.replies.all()), [first, second])

    def test_comments_belong_to_post(self):
        post = make_post()
        make_comment(post=post)
        self.assertEqual(Comment.objects.filter(post=post).count(), 1)
