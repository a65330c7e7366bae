"""Named queries and mutations served by the operations endpoint.

Every handler receives the caller's ``Identity`` and the operation's
variables, runs the authorization gate, then delegates to a service. Handlers
return JSON-ready data.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from social.errors import BadRequest, Forbidden, ValidationFailed
from social.permissions import require_admin, require_authenticated
from social.serializers import (
    CommentSerializer,
    NotificationSerializer,
    PostSerializer,
    ReplySerializer,
    UserSerializer,
    UserSummarySerializer,
)
from social.services import (
    AccountService,
    CascadeService,
    CommentService,
    FeedService,
    FeedType,
    NotificationService,
    PostService,
    RelationshipService,
)
from social.services.relationships import ADDED
from social.utils.ids import parse_id, same_id

logger = logging.getLogger(__name__)

QUERY = "query"
MUTATION = "mutation"


@dataclass(frozen=True)
class Operation:
    name: str
    kind: str
    handler: Callable
    required: Tuple[str, ...] = ()
    public: bool = False


OPERATIONS: Dict[str, Operation] = {}


def operation(name, *, kind=QUERY, required=(), public=False):
    """Register a handler under an operation name.

    Operations that are not public reject anonymous callers before their
    arguments are looked at.
    """
    def register(func):
        OPERATIONS[name] = Operation(name, kind, func, tuple(required), public)
        return func
    return register


def execute(name, identity, variables=None):
    """Run a named operation for identity. Raises SocialError subclasses on failure."""
    op = OPERATIONS.get(name)
    if op is None:
        raise BadRequest(f"Unknown operation: {name}")
    if not op.public:
        require_authenticated(identity)
    variables = {} if variables is None else variables
    if not isinstance(variables, dict):
        raise ValidationFailed("Variables must be an object")
    missing = [arg for arg in op.required if variables.get(arg) in (None, "")]
    if missing:
        raise ValidationFailed(f"Missing required argument: {', '.join(missing)}")
    logger.debug("Executing %s %s", op.kind, name)
    return op.handler(identity, variables)


# --- gate helpers ----------------------------------------------------------

def require_self(identity, user_id):
    """Authenticated, and acting as user_id unless ADMIN."""
    require_authenticated(identity)
    if identity.role != "ADMIN" and not same_id(identity.user_id, user_id):
        raise Forbidden("You can only act on your own account")
    return identity


def require_owner(identity, *owner_ids):
    """Authenticated, and owning the entity (any of owner_ids) unless ADMIN."""
    require_authenticated(identity)
    if identity.role == "ADMIN":
        return identity
    if not any(same_id(identity.user_id, owner_id) for owner_id in owner_ids):
        raise Forbidden("You do not own this resource")
    return identity


def _user(user):
    return UserSerializer(user).data if user is not None else None


def _users(users):
    return UserSummarySerializer(users, many=True).data


def _posts(posts):
    return PostSerializer(posts, many=True).data


accounts = AccountService()
posts = PostService()
comments = CommentService()
relationships = RelationshipService()
cascade = CascadeService()
notifications = NotificationService()
feeds = FeedService()


# --- queries ---------------------------------------------------------------

@operation("isAuthenticated", public=True)
def is_authenticated(identity, args):
    return identity.authenticated


@operation("me")
def me(identity, args):
    require_authenticated(identity)
    return _user(accounts.fetch(args.get("id") or identity.user_id))


@operation("userProfile", required=("id",))
def user_profile(identity, args):
    require_authenticated(identity)
    return _user(accounts.fetch(args["id"]))


@operation("users")
def users(identity, args):
    require_admin(identity)
    return UserSerializer(accounts.list_all(), many=True).data


@operation("followers", required=("id",))
def followers(identity, args):
    require_authenticated(identity)
    return _users(accounts.followers(args["id"]))


@operation("following", required=("id",))
def following(identity, args):
    require_authenticated(identity)
    return _users(accounts.following(args["id"]))


@operation("suggestedUsers", required=("id",))
def suggested_users(identity, args):
    require_authenticated(identity)
    return _users(accounts.suggested(args["id"]))


@operation("posts", required=("feedType",))
def feed(identity, args):
    require_authenticated(identity)
    feed_type = FeedType.parse(args["feedType"])
    if feed_type is None:
        return []
    user_id = parse_id(args.get("id") or identity.user_id, "User")
    return _posts(feeds.select(feed_type, user_id))


@operation("userPosts", required=("id",))
def user_posts(identity, args):
    require_authenticated(identity)
    return _posts(posts.for_user(parse_id(args["id"], "User")))


@operation("post", required=("id",))
def post(identity, args):
    require_authenticated(identity)
    return PostSerializer(posts.fetch(args["id"])).data


@operation("likes", required=("postId",))
def likes(identity, args):
    require_authenticated(identity)
    return _users(posts.likers(args["postId"]))


@operation("comments", required=("postId",))
def post_comments(identity, args):
    require_authenticated(identity)
    return CommentSerializer(comments.for_post(parse_id(args["postId"], "Post")), many=True).data


@operation("comment", required=("id",))
def comment(identity, args):
    require_authenticated(identity)
    return CommentSerializer(comments.fetch(args["id"])).data


@operation("replies", required=("commentId",))
def replies(identity, args):
    require_authenticated(identity)
    return ReplySerializer(comments.replies_for(parse_id(args["commentId"], "Comment")), many=True).data


@operation("notifications", required=("id",))
def list_notifications(identity, args):
    require_self(identity, args["id"])
    user_id = parse_id(args["id"], "User")
    return NotificationSerializer(notifications.list_for_user(user_id), many=True).data


# --- mutations -------------------------------------------------------------

@operation("signup", kind=MUTATION, required=("fullname", "username", "email", "password"), public=True)
def signup(identity, args):
    return _user(accounts.signup(args["fullname"], args["username"], args["email"], args["password"]))


@operation("login", kind=MUTATION, required=("email", "password"), public=True)
def login(identity, args):
    return _user(accounts.login(args["email"], args["password"]))


@operation("followUnfollowUser", kind=MUTATION, required=("id", "toId"))
def follow_unfollow_user(identity, args):
    require_self(identity, args["id"])
    return _user(relationships.follow_unfollow(args["id"], args["toId"]))


@operation("updateUser", kind=MUTATION, required=("id",))
def update_user(identity, args):
    require_self(identity, args["id"])
    user = accounts.update_user(
        args["id"],
        fullname=args.get("fullname"),
        username=args.get("username"),
        email=args.get("email"),
        current_password=args.get("currentPassword"),
        new_password=args.get("newPassword"),
        profile_img=args.get("profileImg"),
        cover_img=args.get("coverImg"),
        link=args.get("link"),
    )
    return _user(user)


@operation("deleteUser", kind=MUTATION, required=("id",))
def delete_user(identity, args):
    require_admin(identity)
    return _user(cascade.delete_user(args["id"]))


@operation("savePost", kind=MUTATION, required=("userId", "postId"))
def save_post(identity, args):
    require_self(identity, args["userId"])
    return relationships.save_unsave(args["userId"], args["postId"])


@operation("addPost", kind=MUTATION, required=("content", "userId"))
def add_post(identity, args):
    require_self(identity, args["userId"])
    return PostSerializer(posts.add_post(args["content"], args["userId"], args.get("image"))).data


@operation("deletePost", kind=MUTATION, required=("id",))
def delete_post(identity, args):
    require_authenticated(identity)
    require_owner(identity, posts.fetch(args["id"]).user_id)
    return PostSerializer(cascade.delete_post(args["id"])).data


@operation("updatePost", kind=MUTATION, required=("id",))
def update_post(identity, args):
    require_authenticated(identity)
    require_owner(identity, posts.fetch(args["id"]).user_id)
    return PostSerializer(posts.update_post(args["id"], args.get("content"), args.get("imageUrl"))).data


@operation("addLike", kind=MUTATION, required=("userId", "postId"))
def add_like(identity, args):
    require_self(identity, args["userId"])
    outcome = relationships.like_unlike(args["userId"], args["postId"])
    if outcome is None:
        return None
    return "Like the post" if outcome == ADDED else "Unlike the post"


@operation("addComment", kind=MUTATION, required=("content", "userId", "postId"))
def add_comment(identity, args):
    require_self(identity, args["userId"])
    return CommentSerializer(comments.add_comment(args["content"], args["userId"], args["postId"])).data


@operation("deleteComment", kind=MUTATION, required=("id",))
def delete_comment(identity, args):
    require_authenticated(identity)
    target = comments.fetch(args["id"])
    require_owner(identity, target.user_id, target.post.user_id)
    return CommentSerializer(cascade.delete_comment(args["id"])).data


@operation("updateComment", kind=MUTATION, required=("id",))
def update_comment(identity, args):
    require_authenticated(identity)
    require_owner(identity, comments.fetch(args["id"]).user_id)
    return CommentSerializer(comments.update_comment(args["id"], args.get("content"))).data


@operation("addReply", kind=MUTATION, required=("content", "postId", "userId", "commentId"))
def add_reply(identity, args):
    require_self(identity, args["userId"])
    reply = comments.add_reply(args["content"], args["postId"], args["userId"], args["commentId"])
    return ReplySerializer(reply).data


@operation("updateReply", kind=MUTATION, required=("id",))
def update_reply(identity, args):
    require_authenticated(identity)
    require_owner(identity, comments.replies.get_by_id(args["id"]).user_id)
    return ReplySerializer(comments.update_reply(args["id"], args.get("content"))).data


@operation("deleteReply", kind=MUTATION, required=("id",))
def delete_reply(identity, args):
    require_authenticated(identity)
    require_owner(identity, cascade.replies.get_by_id(args["id"]).user_id)
    return ReplySerializer(cascade.delete_reply(args["id"])).data


@operation("deleteNotifications", kind=MUTATION, required=("id",))
def delete_notifications(identity, args):
    require_self(identity, args["id"])
    return notifications.delete_all_for_user(parse_id(args["id"], "User"))
