"""Repository helpers for follower relationships."""

from social.db_accessor import DB_Accessor
from social.models import Follower, Like, SavedPost


class FollowersRepo(DB_Accessor):
    """Repository wrapper for follower relationships."""
    def __init__(self) -> None:
        """Initialise with the Follower model."""
        super().__init__(Follower)

    def drop_edges_for_user(self, user_id) -> int:
        """Remove every follow, like and save edge that involves user_id."""
        count = self.delete(follower_id=user_id)
        count += self.delete(author_id=user_id)
        count += Like.objects.filter(user_id=user_id).delete()[0]
        count += SavedPost.objects.filter(user_id=user_id).delete()[0]
        return count
