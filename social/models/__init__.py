from .user import User
from .post import Post
from .comment import Comment
from .reply import Reply
from .notification import Notification
from .followers import Follower
from .like import Like
from .saved_post import SavedPost

__all__ = [
    "User",
    "Post",
    "Comment",
    "Reply",
    "Notification",
    "Follower",
    "Like",
    "SavedPost",
]
