"""Network configuration dataclass."""

from dataclasses import asdict, dataclass
from typing import Any

__all__ = ["NetworkConfig", "DEFAULT_RECOMMENDATION_LIMIT"]

DEFAULT_RECOMMENDATION_LIMIT = 5


@dataclass(frozen=True)
class NetworkConfig:
    """Configuration for a social network facade.

    Attributes
    ----------
    recommendation_limit : int
        Number of suggestions returned when no explicit limit is given
        (default: 5).
    reject_self_friendship : bool
        Raise ``SelfFriendshipError`` on ``add_friendship(u, u)`` instead of
        ignoring it (default: False).
    """

    recommendation_limit: int = DEFAULT_RECOMMENDATION_LIMIT
    reject_self_friendship: bool = False

    def __post_init__(self) -> None:
        """Validate values."""
        if self.recommendation_limit < 0:
            raise ValueError(
                f"recommendation_limit must be >= 0, got {self.recommendation_limit}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
