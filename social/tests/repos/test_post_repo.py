from datetime import timedelta

from django.test import TestCase
from django.utils import timezone

from social.models import Like, SavedPost
from social.repos.post_repo import PostRepo
from social.tests.helpers import make_post, make_user


class PostRepoTestCase(TestCase):
    def setUp(self):
        self.repo = PostRepo()
        self.alice = make_user()
        self.bob = make_user()
        now = timezone.now()
        self.old = make_post(author=self.alice, created_at=now - timedelta(hours=2))
        self.mid = make_post(author=self.bob, created_at=now - timedelta(hours=1))
        self.new = make_post(author=self.alice, created_at=now)

    def test_list_all_newest_first(self):
        self.assertEqual(list(self.repo.list_all()), [self.new, self.mid, self.old])

    def test_list_for_user(self):
        self.assertEqual(list(self.repo.list_for_user(self.alice.pk)), [self.new, self.old])

    def test_list_for_authors_merges_newest_first(self):
        posts = self.repo.list_for_authors([self.alice.pk, self.bob.pk])
        self.assertEqual(list(posts), [self.new, self.mid, self.old])
        self.assertEqual(list(self.repo.list_for_authors([])), [])

    def test_liked_by_orders_by_like_time_and_caps(self):
        first = Like.objects.create(user=self.bob, post=self.new)
        Like.objects.create(user=self.bob, post=self.old)
        Like.objects.filter(pk=first.pk).update(created_at=timezone.now() - timedelta(days=1))
        self.assertEqual(self.repo.liked_by(self.bob.pk), [self.old, self.new])
        self.assertEqual(self.repo.liked_by(self.bob.pk, limit=1), [self.old])

    def test_saved_by(self):
        SavedPost.objects.create(user=self.alice, post=self.mid)
        self.assertEqual(self.repo.saved_by(self.alice.pk), [self.mid])
        self.assertEqual(self.repo.saved_by(self.bob.pk), [])
