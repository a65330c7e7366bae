"""Identifier helpers."""

import uuid

from social.errors import NotFound


def uuid7_or_4() -> uuid.UUID:
    """Return uuid7 when available, else uuid4 (used for primary keys)."""
    return getattr(uuid, "uuid7", uuid.uuid4)()


def parse_id(value, label="Entity") -> uuid.UUID:
    """Coerce an inbound id to a UUID; malformed ids are reported as not found."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise NotFound(f"{label} not found")


def same_id(a, b) -> bool:
    """Compare two ids regardless of str/UUID representation."""
    if a is None or b is None:
        return False
    return str(a).lower() == str(b).lower()
