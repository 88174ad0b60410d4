"""Undirected adjacency graph of users and friendships.

Provides membership and neighbor queries, breadth-first shortest paths and
mutual-friend based recommendations.
"""

from collections import deque

from socialgraph.config import DEFAULT_RECOMMENDATION_LIMIT
from socialgraph.models import Recommendation, UserId

__all__ = ["AdjacencyGraph"]


class AdjacencyGraph:
    """Undirected, unweighted graph stored as an adjacency mapping.

    Each user maps to an insertion-ordered neighbor collection (a dict with
    ``None`` values), giving O(1) membership and a stable BFS visiting order.
    Friendships are always stored in both directions.
    """

    def __init__(self) -> None:
        """Initialize empty graph."""
        self._adjacency: dict[UserId, dict[UserId, None]] = {}

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, user: object) -> bool:
        return user in self._adjacency

    def add_user(self, user: UserId) -> None:
        """Ensure user is present in the graph.

        Parameters
        ----------
        user : UserId
            User to add. Existing users keep their neighbors.
        """
        if user not in self._adjacency:
            self._adjacency[user] = {}

    def add_friendship(self, user_a: UserId, user_b: UserId) -> None:
        """Connect two users, creating them if needed.

        A self-friendship only ensures the user exists; no loop is stored.

        Parameters
        ----------
        user_a : UserId
            First endpoint.
        user_b : UserId
            Second endpoint.
        """
        self.add_user(user_a)
        self.add_user(user_b)

        if user_a == user_b:
            return

        self._adjacency[user_a][user_b] = None
        self._adjacency[user_b][user_a] = None

    def has_user(self, user: UserId) -> bool:
        """Check whether user is known."""
        return user in self._adjacency

    def neighbors(self, user: UserId) -> set[UserId]:
        """Return a new set with the friends of user.

        Parameters
        ----------
        user : UserId
            User to look up.

        Returns
        -------
        set[UserId]
            Friends of user; empty for unknown users.
        """
        return set(self._adjacency.get(user, ()))

    def list_users(self) -> list[UserId]:
        """Return a snapshot of all known users."""
        return list(self._adjacency)

    def friendship_count(self) -> int:
        """Return the number of undirected friendships."""
        return sum(len(friends) for friends in self._adjacency.values()) // 2

    def shortest_path(self, src: UserId, dst: UserId) -> list[UserId]:
        """Find a path with the fewest friendships between two users.

        Breadth-first search from src, stopping as soon as dst is reached.
        When several shortest paths exist, which one is returned is not
        part of the contract.

        Parameters
        ----------
        src : UserId
            Start user.
        dst : UserId
            Target user.

        Returns
        -------
        list[UserId]
            Users from src to dst inclusive; ``[src]`` when src == dst and
            empty when either user is unknown or dst is unreachable.
        """
        if src not in self._adjacency or dst not in self._adjacency:
            return []

        if src == dst:
            return [src]

        # src maps to itself so the walk back can stop on it
        previous: dict[UserId, UserId] = {src: src}
        queue: deque[UserId] = deque([src])

        while queue:
            current = queue.popleft()
            for neighbor in self._adjacency[current]:
                if neighbor in previous:
                    continue
                previous[neighbor] = current
                if neighbor == dst:
                    return _walk_back(previous, src, dst)
                queue.append(neighbor)

        return []

    def mutual_friends_count(self, user_a: UserId, user_b: UserId) -> int:
        """Count friends shared by two users.

        Iterates the smaller neighbor collection and probes the larger one,
        so the cost is O(min(deg(a), deg(b))).

        Parameters
        ----------
        user_a : UserId
            First user.
        user_b : UserId
            Second user.

        Returns
        -------
        int
            Size of the neighbor intersection (0 for unknown users).
        """
        friends_a = self._adjacency.get(user_a, {})
        friends_b = self._adjacency.get(user_b, {})

        if len(friends_a) > len(friends_b):
            friends_a, friends_b = friends_b, friends_a

        return sum(1 for friend in friends_a if friend in friends_b)

    def recommend_friends(
        self,
        user: UserId,
        k: int = DEFAULT_RECOMMENDATION_LIMIT,
    ) -> list[Recommendation]:
        """Suggest new friends ranked by number of mutual friends.

        Candidates exclude the user and its current friends. Ordering is
        mutual count descending, then identifier ascending.

        Parameters
        ----------
        user : UserId
            User to recommend for.
        k : int, optional
            Maximum number of suggestions, by default 5.

        Returns
        -------
        list[Recommendation]
            At most k suggestions, all with a positive mutual count. Empty
            for unknown users or k <= 0.
        """
        if k <= 0 or user not in self._adjacency:
            return []

        friends = self._adjacency[user]

        # Only friends of friends can share a neighbor with user.
        candidates: dict[UserId, None] = {}
        for friend in friends:
            for candidate in self._adjacency[friend]:
                if candidate != user and candidate not in friends:
                    candidates[candidate] = None

        ranked = [
            Recommendation(candidate, self.mutual_friends_count(user, candidate))
            for candidate in candidates
        ]
        ranked.sort(key=lambda r: (-r.mutual_count, r.user))

        return ranked[:k]


def _walk_back(
    previous: dict[UserId, UserId],
    src: UserId,
    dst: UserId,
) -> list[UserId]:
    """Rebuild the BFS path from predecessor links."""
    path = [dst]
    while path[-1] != src:
        path.append(previous[path[-1]])
    path.reverse()
    return path
