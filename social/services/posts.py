"""Service helpers for post creation, updates and lookups."""

import logging

from social.media import MediaHost
from social.repos.post_repo import PostRepo
from social.repos.user_repo import UserRepo

logger = logging.getLogger(__name__)


class PostService:
    """Encapsulate post lifecycle operations."""

    def __init__(self, repo=None, users=None, media=None):
        self.repo = repo or PostRepo()
        self.users = users or UserRepo()
        self.media = media or MediaHost()

    def add_post(self, content, user_id, image=None):
        """Create a post for an existing user, hosting the image first when one is given."""
        author = self.users.get_by_id(user_id)
        image_url = self.media.upload(image) if image else ""
        post = self.repo.create(content=content, user=author, image_url=image_url)
        logger.info("User %s added post %s", author.pk, post.pk)
        return post

    def update_post(self, post_id, content=None, image_url=None):
        return self.repo.update_by_id(post_id, content=content, image_url=image_url)

    def fetch(self, post_id):
        return self.repo.get_by_id(post_id)

    def for_user(self, user_id):
        return list(self.repo.list_for_user(user_id))

    def likers(self, post_id):
        """Users that liked the post."""
        post = self.repo.get_by_id(post_id)
        return self.users.likers_of(post.pk)
