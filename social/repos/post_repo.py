"""Repository helpers for fetching posts."""

from typing import List, Optional

from django.db.models import QuerySet

from social.db_accessor import DB_Accessor
from social.models import Like, Post, SavedPost


class PostRepo(DB_Accessor):
    """Repository for Post queries (feeds, user-specific, relations)."""

    list_fields = {
        "likes": (Like, "post", "user"),
    }

    def __init__(self) -> None:
        """Initialise with the Post model."""
        super().__init__(Post)

    def list_all(self) -> QuerySet:
        """Every post, newest first."""
        return self.list(order_by=("-created_at",))

    def list_for_user(self, user_id) -> QuerySet:
        """Return posts authored by a given user, newest first."""
        return self.list(filters={"user_id": user_id}, order_by=("-created_at",))

    def list_for_authors(self, author_ids) -> QuerySet:
        """Return posts by any of author_ids, newest first."""
        author_ids = list(author_ids)
        if not author_ids:
            return self.model.objects.none()
        return self.list(filters={"user_id__in": author_ids}, order_by=("-created_at",))

    def liked_by(self, user_id, *, limit: Optional[int] = None) -> List[Post]:
        """Posts liked by user_id, most recently liked first."""
        return self._through(Like, user_id, limit)

    def saved_by(self, user_id, *, limit: Optional[int] = None) -> List[Post]:
        """Posts saved by user_id, most recently saved first."""
        return self._through(SavedPost, user_id, limit)

    def _through(self, edge_model, user_id, limit):
        edges = edge_model.objects.filter(user_id=user_id).select_related("post").order_by("-created_at")
        if limit is not None:
            edges = edges[:limit]
        return [edge.post for edge in edges]
