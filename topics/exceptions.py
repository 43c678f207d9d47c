from __future__ import annotations

from courses.exceptions import InvalidInput


class TopicError(InvalidInput):
    """Topic-specific business rule violation (e.g. duplicate name)."""
