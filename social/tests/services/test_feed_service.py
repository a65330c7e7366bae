from datetime import timedelta

from django.test import TestCase, override_settings
from django.utils import timezone

from social.services import FeedService, FeedType, RelationshipService
from social.tests.helpers import make_post, make_user


class FeedServiceTestCase(TestCase):
    def setUp(self):
        self.service = FeedService()
        self.relationships = RelationshipService()
        self.viewer = make_user()
        self.friend = make_user()
        self.stranger = make_user()
        now = timezone.now()
        self.friend_old = make_post(author=self.friend, created_at=now - timedelta(hours=3))
        self.friend_new = make_post(author=self.friend, created_at=now - timedelta(hours=1))
        self.stranger_post = make_post(author=self.stranger, created_at=now - timedelta(hours=2))
        self.own_post = make_post(author=self.viewer, created_at=now)

    def test_following_feed(self):
        self.relationships.follow_unfollow(self.viewer.pk, self.friend.pk)
        feed = self.service.select("following", self.viewer.pk)
        self.assertEqual(feed, [self.friend_new, self.friend_old])

    def test_following_feed_unions_every_followed_author(self):
        other_friend = make_user()
        other_post = make_post(author=other_friend)
        self.relationships.follow_unfollow(self.viewer.pk, self.friend.pk)
        self.relationships.follow_unfollow(self.viewer.pk, other_friend.pk)

        feed = self.service.select("following", self.viewer.pk)

        self.assertCountEqual(feed, [self.friend_old, self.friend_new, other_post])
        self.assertNotIn(self.stranger_post, feed)
        self.assertNotIn(self.own_post, feed)

    def test_following_feed_empty_when_following_nobody(self):
        self.assertEqual(self.service.select(FeedType.FOLLOWING, self.viewer.pk), [])

    def test_for_you_is_own_posts(self):
        self.assertEqual(self.service.select("forYou", self.viewer.pk), [self.own_post])

    def test_posts_is_everything_newest_first(self):
        feed = self.service.select("posts", self.viewer.pk)
        self.assertEqual(feed, [self.own_post, self.friend_new, self.stranger_post, self.friend_old])

    def test_likes_and_saved(self):
        self.relationships.like_unlike(self.viewer.pk, self.stranger_post.pk)
        self.relationships.save_unsave(self.viewer.pk, self.friend_old.pk)
        self.assertEqual(self.service.select("likes", self.viewer.pk), [self.stranger_post])
        self.assertEqual(self.service.select("saved", self.viewer.pk), [self.friend_old])

    @override_settings(SOCIAL_FEED_RELATION_LIMIT=1)
    def test_relation_feeds_are_capped(self):
        self.relationships.like_unlike(self.viewer.pk, self.stranger_post.pk)
        self.relationships.like_unlike(self.viewer.pk, self.friend_new.pk)
        self.assertEqual(len(self.service.select("likes", self.viewer.pk)), 1)

    def test_unknown_feed_type_is_empty(self):
        self.assertEqual(self.service.select("trending", self.viewer.pk), [])
        self.assertEqual(self.service.select(None, self.viewer.pk), [])

    def test_parse(self):
        self.assertIs(FeedType.parse("saved"), FeedType.SAVED)
        self.assertIsNone(FeedType.parse("Saved"))
