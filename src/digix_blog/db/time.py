"""Clock used for post, like and comment timestamps.

Timestamps are stored in UTC. SQLite keeps them without an offset, so values
read back from it are naive UTC.
"""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return an aware UTC timestamp for ``created_at``/``updated_at``/``approved_at``."""
    return datetime.now(UTC)
