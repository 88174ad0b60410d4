"""Union-Find (Disjoint Set Union) data structure for community grouping."""

from collections import defaultdict

from socialgraph.errors import UnknownUserError
from socialgraph.models import UserId

__all__ = ["UnionFind"]


class UnionFind:
    """Union-Find data structure with path compression and union by rank.

    Tracks which users are reachable from one another through friendships.
    Merges are permanent: the number of distinct roots never increases.

    Attributes
    ----------
    parent : dict[UserId, UserId]
        Parent pointers for each element (roots point to themselves).
    rank : dict[UserId, int]
        Rank (upper bound on tree height) for each element.
    """

    def __init__(self) -> None:
        """Initialize empty Union-Find structure."""
        self.parent: dict[UserId, UserId] = {}
        self.rank: dict[UserId, int] = {}

    def __len__(self) -> int:
        return len(self.parent)

    def __contains__(self, x: object) -> bool:
        return x in self.parent

    def add(self, x: UserId) -> None:
        """Create a singleton set for x if it is not known yet.

        Parameters
        ----------
        x : UserId
            Element to add.
        """
        if x not in self.parent:
            self.parent[x] = x
            self.rank[x] = 0

    def find(self, x: UserId) -> UserId:
        """Find root of set containing x with path compression.

        Every node visited on the way up is re-pointed directly at the root.

        Parameters
        ----------
        x : UserId
            Element to find.

        Returns
        -------
        UserId
            Root of set containing x.

        Raises
        ------
        UnknownUserError
            If x was never added.
        """
        if x not in self.parent:
            raise UnknownUserError(x)

        if self.parent[x] != x:
            self.parent[x] = self.find(self.parent[x])

        return self.parent[x]

    def unite(self, x: UserId, y: UserId) -> bool:
        """Union sets containing x and y using union by rank.

        Both elements are added first when unknown. On equal ranks the root
        of y is attached under the root of x.

        Parameters
        ----------
        x : UserId
            First element.
        y : UserId
            Second element.

        Returns
        -------
        bool
            True if two distinct sets were merged.
        """
        self.add(x)
        self.add(y)

        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        return True

    def connected(self, x: UserId, y: UserId) -> bool:
        """Check whether x and y belong to the same set.

        Unknown elements are never connected to anything.
        """
        if x not in self.parent or y not in self.parent:
            return False
        return self.find(x) == self.find(y)

    def count(self) -> int:
        """Return the number of distinct sets."""
        return sum(1 for x in self.parent if self.parent[x] == x)

    def communities(self) -> dict[UserId, list[UserId]]:
        """Group all known elements by their root.

        Returns
        -------
        dict[UserId, list[UserId]]
            Mapping from root to member list. Member order is unspecified.
        """
        groups: dict[UserId, list[UserId]] = defaultdict(list)

        for element in self.parent:
            groups[self.find(element)].append(element)

        return dict(groups)
