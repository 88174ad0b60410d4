"""Plain-text rendering of query results for the CLI."""

from collections.abc import Sequence

from socialgraph.models import Recommendation, UserId

__all__ = [
    "format_users",
    "format_path",
    "format_recommendations",
    "format_communities",
    "sorted_communities",
]


def format_users(users: Sequence[UserId]) -> str:
    return "Users: " + " ".join(str(user) for user in users)


def format_path(path: Sequence[UserId]) -> str:
    """Render a path as ``Shortest path: a -> b -> c``."""
    if not path:
        return "No path found."
    return "Shortest path: " + " -> ".join(str(user) for user in path)


def format_recommendations(recommendations: Sequence[Recommendation]) -> str:
    """Render recommendations one per line as ``user: mutual_count``."""
    if not recommendations:
        return "No recommendations available."

    lines = ["Friend recommendations (user: mutual_count):"]
    lines.extend(f"  {rec.user}: {rec.mutual_count}" for rec in recommendations)
    return "\n".join(lines)


def sorted_communities(
    groups: dict[UserId, list[UserId]],
) -> list[tuple[UserId, list[UserId]]]:
    """Sort members within each community, then communities by first member.

    Parameters
    ----------
    groups : dict[UserId, list[UserId]]
        Mapping from root to members, as returned by ``communities()``.

    Returns
    -------
    list[tuple[UserId, list[UserId]]]
        (root, sorted members) pairs in display order.
    """
    ordered = [(root, sorted(members)) for root, members in groups.items()]
    ordered.sort(key=lambda item: item[1][0])
    return ordered


def format_communities(groups: dict[UserId, list[UserId]]) -> str:
    """Render communities as ``Root r -> [ m1 m2 ]`` lines."""
    lines = ["Communities (root -> members):"]
    for root, members in sorted_communities(groups):
        lines.append(f"  Root {root} -> [ {' '.join(str(m) for m in members)} ]")
    return "\n".join(lines)
