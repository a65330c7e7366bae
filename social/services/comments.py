"""Service helpers for creating and updating comments and replies."""

from social.errors import ValidationFailed
from social.repos.comment_repo import CommentRepo, ReplyRepo
from social.repos.post_repo import PostRepo
from social.repos.user_repo import UserRepo
from social.utils.ids import same_id


class CommentService:
    """Encapsulate comment and reply CRUD for posts."""

    def __init__(self):
        self.comments = CommentRepo()
        self.replies = ReplyRepo()
        self.posts = PostRepo()
        self.users = UserRepo()

    def add_comment(self, content, user_id, post_id):
        """Create a comment; the post author is notified on save."""
        post = self.posts.get_by_id(post_id)
        author = self.users.get_by_id(user_id)
        return self.comments.create(content=content, user=author, post=post)

    def fetch(self, comment_id):
        """Fetch a comment by id or raise NotFound."""
        return self.comments.get_by_id(comment_id)

    def for_post(self, post_id):
        return list(self.comments.list_for_post(post_id))

    def update_comment(self, comment_id, content=None):
        return self.comments.update_by_id(comment_id, content=content)

    def add_reply(self, content, post_id, user_id, comment_id):
        """Create a reply to a comment; the post id must be the comment's post."""
        comment = self.comments.get_by_id(comment_id)
        if post_id and not same_id(post_id, comment.post_id):
            raise ValidationFailed("Reply post does not match the comment's post")
        author = self.users.get_by_id(user_id)
        return self.replies.create(content=content, user=author, comment=comment, post_id=comment.post_id)

    def replies_for(self, comment_id):
        return list(self.replies.list_for_comment(comment_id))

    def update_reply(self, reply_id, content=None):
        return self.replies.update_by_id(reply_id, content=content)
