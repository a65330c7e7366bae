import uuid

from social.models import Comment, Post, Reply, User
from social.identity import Identity


def make_user(**kwargs):
    username = kwargs.pop("username", f"user_{uuid.uuid4().hex[:8]}")
    email = kwargs.pop("email", f"{username}@example.org")
    password = kwargs.pop("password", "Password123")

    return User.objects.create_user(
        username=username,
        email=email,
        password=password,
        fullname=kwargs.pop("fullname", "John Doe"),
        **kwargs,
    )


def make_admin(**kwargs):
    kwargs.setdefault("role", User.ROLE_ADMIN)
    return make_user(**kwargs)


def make_post(*, author=None, content="test post", **extra):
    """Create and return a post; a fresh author is made when none is given."""
    if author is None:
        author = make_user()
    return Post.objects.create(user=author, content=content, **extra)


def make_comment(*, post=None, author=None, content="nice"):
    post = post or make_post()
    return Comment.objects.create(post=post, user=author or post.user, content=content)


def make_reply(*, comment=None, author=None, content="thanks"):
    comment = comment or make_comment()
    return Reply.objects.create(post=comment.post, comment=comment, user=author or comment.user, content=content)


def identity_of(user):
    return Identity.for_user(user)
