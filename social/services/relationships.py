"""Toggle-with-mirror maintenance for follow, like and save relationships.

Each relationship is a pair of list fields, one per endpoint, that must never
diverge. Both sides are backed by the same edge row, and the list operations
are idempotent, so touching the mirror after the forward side is safe under
retries.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from django.db import transaction

from social.repos.post_repo import PostRepo
from social.repos.user_repo import UserRepo
from social.utils.ids import same_id

logger = logging.getLogger(__name__)

ADDED = "added"
REMOVED = "removed"


@dataclass(frozen=True)
class Relation:
    name: str
    target: str
    forward_field: str
    mirror_field: Optional[str] = None


FOLLOW = Relation("follow", target="user", forward_field="following", mirror_field="followers")
LIKE = Relation("like", target="post", forward_field="likedPosts", mirror_field="likes")
SAVE = Relation("save", target="post", forward_field="savedPosts")


class RelationshipService:
    """Follow/unfollow, like/unlike and save/unsave."""

    def __init__(self, user_repo=None, post_repo=None):
        self.user_repo = user_repo or UserRepo()
        self.post_repo = post_repo or PostRepo()

    def _target_repo(self, relation):
        return self.user_repo if relation.target == "user" else self.post_repo

    @transaction.atomic
    def toggle(self, relation, actor_id, target_id):
        """Flip membership of target in the actor's forward list; returns ADDED or REMOVED."""
        mirror_repo = self._target_repo(relation)
        if self.user_repo.list_contains(actor_id, relation.forward_field, target_id):
            self.user_repo.remove_from_list(actor_id, relation.forward_field, target_id)
            if relation.mirror_field:
                mirror_repo.remove_from_list(target_id, relation.mirror_field, actor_id)
            outcome = REMOVED
        else:
            self.user_repo.add_to_list(actor_id, relation.forward_field, target_id)
            if relation.mirror_field:
                mirror_repo.add_to_list(target_id, relation.mirror_field, actor_id)
            outcome = ADDED
        logger.info("%s %s: %s -> %s", relation.name, outcome, actor_id, target_id)
        return outcome

    def follow_unfollow(self, actor_id, target_id):
        """Toggle actor following target. Returns the refreshed actor, or None for self/missing users."""
        if same_id(actor_id, target_id):
            return None
        actor = self.user_repo.find_by_id(actor_id)
        target = self.user_repo.find_by_id(target_id)
        if actor is None or target is None:
            return None
        self.toggle(FOLLOW, actor.pk, target.pk)
        return actor

    def like_unlike(self, user_id, post_id):
        """Toggle a like. Returns ADDED/REMOVED, or None when an endpoint is missing."""
        if same_id(user_id, post_id):
            return None
        user = self.user_repo.find_by_id(user_id)
        post = self.post_repo.find_by_id(post_id)
        if user is None or post is None:
            return None
        return self.toggle(LIKE, user.pk, post.pk)

    def save_unsave(self, user_id, post_id):
        """Toggle a saved post. Returns True when saved, False when unsaved, None when missing."""
        user = self.user_repo.find_by_id(user_id)
        post = self.post_repo.find_by_id(post_id)
        if user is None or post is None:
            return None
        return self.toggle(SAVE, user.pk, post.pk) == ADDED
