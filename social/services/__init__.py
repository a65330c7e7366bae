from .accounts import AccountService
from .cascade import CascadeService
from .comments import CommentService
from .feed import FeedService, FeedType
from .notifications import NotificationService
from .posts import PostService
from .relationships import RelationshipService

__all__ = [
    "AccountService",
    "CascadeService",
    "CommentService",
    "FeedService",
    "FeedType",
    "NotificationService",
    "PostService",
    "RelationshipService",
]
