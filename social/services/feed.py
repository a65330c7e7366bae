"""Feed selection over a closed set of feed types."""

from enum import Enum
from typing import List

from django.conf import settings

from social.models import Post
from social.repos.post_repo import PostRepo
from social.repos.user_repo import UserRepo


class FeedType(str, Enum):
    FOR_YOU = "forYou"
    FOLLOWING = "following"
    POSTS = "posts"
    LIKES = "likes"
    SAVED = "saved"

    @classmethod
    def parse(cls, value):
        """Return the member named by value, or None."""
        try:
            return cls(value)
        except (ValueError, TypeError):
            return None


class FeedStrategy:
    """Uniform capability: fetch(user_id) -> list of posts."""

    def __init__(self, posts=None, users=None):
        self.posts = posts or PostRepo()
        self.users = users or UserRepo()

    def fetch(self, user_id) -> List[Post]:
        raise NotImplementedError

    @property
    def relation_limit(self):
        return settings.SOCIAL_FEED_RELATION_LIMIT


class AuthoredFeed(FeedStrategy):
    """Posts authored by the user, newest first."""

    def fetch(self, user_id):
        return list(self.posts.list_for_user(user_id))


class FollowingFeed(FeedStrategy):
    """Posts from everyone the user follows, newest first across authors."""

    def fetch(self, user_id):
        author_ids = self.users.list_values(user_id, "following")
        return list(self.posts.list_for_authors(author_ids))


class GlobalFeed(FeedStrategy):
    """Every post, newest first."""

    def fetch(self, user_id):
        return list(self.posts.list_all())


class LikedFeed(FeedStrategy):
    """Posts the user liked, most recently liked first (capped)."""

    def fetch(self, user_id):
        return self.posts.liked_by(user_id, limit=self.relation_limit)


class SavedFeed(FeedStrategy):
    """Posts the user saved, most recently saved first (capped)."""

    def fetch(self, user_id):
        return self.posts.saved_by(user_id, limit=self.relation_limit)


STRATEGIES = {
    FeedType.FOR_YOU: AuthoredFeed,
    FeedType.FOLLOWING: FollowingFeed,
    FeedType.POSTS: GlobalFeed,
    FeedType.LIKES: LikedFeed,
    FeedType.SAVED: SavedFeed,
}


class FeedService:
    """Dispatch a feed request to its strategy."""

    def __init__(self, strategies=None):
        self.strategies = strategies or STRATEGIES

    def select(self, feed_type, user_id) -> List[Post]:
        """Return the feed; an unrecognised feed type yields an empty list."""
        member = FeedType.parse(feed_type)
        if member is None:
            return []
        return self.strategies[member]().fetch(user_id)
