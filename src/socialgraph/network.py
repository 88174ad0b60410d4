"""Social network facade composing the adjacency graph and union-find.

Mutations are mirrored into both structures; queries go to whichever
structure owns the answer. The two structures never see each other.
"""

from collections.abc import Iterable

from socialgraph.audit.logger import AuditLogger
from socialgraph.config import NetworkConfig
from socialgraph.errors import SelfFriendshipError
from socialgraph.graph import AdjacencyGraph, UnionFind
from socialgraph.models import Recommendation, UserId

__all__ = ["SocialNetwork"]


class SocialNetwork:
    """In-memory social network.

    Attributes
    ----------
    config : NetworkConfig
        Network configuration.
    audit_logger : AuditLogger | None
        Receives user_added/friendship_added events when set.
    """

    def __init__(
        self,
        config: NetworkConfig | None = None,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        """Initialize empty network.

        Parameters
        ----------
        config : NetworkConfig | None, optional
            Configuration, defaults to ``NetworkConfig()``.
        audit_logger : AuditLogger | None, optional
            Event logger. If None, no events are written.
        """
        self.config = config or NetworkConfig()
        self.audit_logger = audit_logger
        self._graph = AdjacencyGraph()
        self._communities = UnionFind()

    def __len__(self) -> int:
        return len(self._graph)

    def __contains__(self, user: object) -> bool:
        return user in self._graph

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_user(self, user: UserId) -> None:
        """Add a user to both structures (idempotent)."""
        is_new = user not in self._graph

        self._graph.add_user(user)
        self._communities.add(user)

        if is_new and self.audit_logger is not None:
            self.audit_logger.user_added(user)

    def add_friendship(self, user_a: UserId, user_b: UserId) -> None:
        """Befriend two users, adding them first if needed (idempotent).

        Parameters
        ----------
        user_a : UserId
            First endpoint.
        user_b : UserId
            Second endpoint.

        Raises
        ------
        SelfFriendshipError
            If user_a == user_b and ``config.reject_self_friendship`` is set.
        """
        if user_a == user_b:
            if self.config.reject_self_friendship:
                raise SelfFriendshipError(user_a)
            self.add_user(user_a)
            return

        self.add_user(user_a)
        self.add_user(user_b)

        is_new = user_b not in self._graph.neighbors(user_a)

        self._graph.add_friendship(user_a, user_b)
        merged = self._communities.unite(user_a, user_b)

        if is_new and self.audit_logger is not None:
            self.audit_logger.friendship_added(user_a, user_b, merged)

    def add_friendships(self, pairs: Iterable[tuple[UserId, UserId]]) -> None:
        """Add every (user_a, user_b) pair as a friendship."""
        for user_a, user_b in pairs:
            self.add_friendship(user_a, user_b)

    # ------------------------------------------------------------------
    # Graph queries
    # ------------------------------------------------------------------

    def has_user(self, user: UserId) -> bool:
        return self._graph.has_user(user)

    def neighbors(self, user: UserId) -> set[UserId]:
        return self._graph.neighbors(user)

    def list_users(self) -> list[UserId]:
        return self._graph.list_users()

    def friendship_count(self) -> int:
        return self._graph.friendship_count()

    def shortest_path(self, src: UserId, dst: UserId) -> list[UserId]:
        """Return a shortest friendship path from src to dst (may be empty)."""
        return self._graph.shortest_path(src, dst)

    def mutual_friends_count(self, user_a: UserId, user_b: UserId) -> int:
        return self._graph.mutual_friends_count(user_a, user_b)

    def recommend_friends(self, user: UserId, k: int | None = None) -> list[Recommendation]:
        """Suggest friends for user.

        Parameters
        ----------
        user : UserId
            User to recommend for.
        k : int | None, optional
            Maximum suggestions; ``config.recommendation_limit`` if None.

        Returns
        -------
        list[Recommendation]
            Ranked suggestions, possibly empty.
        """
        limit = self.config.recommendation_limit if k is None else k
        return self._graph.recommend_friends(user, limit)

    # ------------------------------------------------------------------
    # Community queries
    # ------------------------------------------------------------------

    def communities(self) -> dict[UserId, list[UserId]]:
        """Return connected communities as root -> members."""
        return self._communities.communities()

    def same_community(self, user_a: UserId, user_b: UserId) -> bool:
        return self._communities.connected(user_a, user_b)

    def community_count(self) -> int:
        return self._communities.count()
