"""Shared types for the social graph structures."""

from collections.abc import Hashable
from typing import Any, NamedTuple

__all__ = ["UserId", "Recommendation"]

# Identifiers must be hashable and mutually comparable (ints in practice).
UserId = Hashable


class Recommendation(NamedTuple):
    """A friend suggestion ranked by shared neighbors.

    Compares equal to a plain ``(user, mutual_count)`` tuple.

    Attributes
    ----------
    user : UserId
        Suggested user.
    mutual_count : int
        Number of friends shared with the target user.
    """

    user: UserId
    mutual_count: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns
        -------
        dict[str, Any]
            Dictionary representation.
        """
        return {"user": self.user, "mutual_count": self.mutual_count}
