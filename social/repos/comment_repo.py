"""Repository helpers for comments and replies."""

from typing import List

from django.db.models import QuerySet

from social.db_accessor import DB_Accessor
from social.models import Comment, Reply


class CommentRepo(DB_Accessor):
    """Repository for Comment queries."""

    def __init__(self) -> None:
        super().__init__(Comment)

    def list_for_post(self, post_id) -> QuerySet:
        """Comments on a post, newest first."""
        return self.list(filters={"post_id": post_id}, order_by=("-created_at",))

    def ids_for(self, **lookup) -> List:
        return list(self.model.objects.filter(**lookup).values_list("id", flat=True))


class ReplyRepo(DB_Accessor):
    """Repository for Reply queries."""

    def __init__(self) -> None:
        super().__init__(Reply)

    def list_for_comment(self, comment_id) -> QuerySet:
        """Replies to a comment in the order they were written."""
        return self.list(filters={"comment_id": comment_id}, order_by=("created_at",))
