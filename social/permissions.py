"""Authorization gate evaluated before any operation side effect."""

from social.errors import Forbidden, Unauthenticated


def require_authenticated(identity):
    """Raise Unauthenticated unless the identity is authenticated."""
    if identity is None or not identity.authenticated:
        raise Unauthenticated()
    return identity


def require_role(identity, expected):
    """Raise Forbidden unless the identity holds the expected role."""
    if identity is None or identity.role != expected:
        raise Forbidden(f"Requires role {expected}")
    return identity


def require_admin(identity):
    """Authenticated and ADMIN; the order matters for the error reported."""
    require_authenticated(identity)
    return require_role(identity, "ADMIN")
