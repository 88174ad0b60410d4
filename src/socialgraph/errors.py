"""Exception hierarchy for socialgraph."""

from typing import Any

__all__ = [
    "SocialGraphError",
    "UnknownUserError",
    "SelfFriendshipError",
    "NetworkFileError",
]


class SocialGraphError(Exception):
    """Base class for all socialgraph errors."""


class UnknownUserError(SocialGraphError, KeyError):
    """Raised when an identifier was never added to a structure.

    Attributes
    ----------
    user : Any
        The unknown identifier.
    """

    def __init__(self, user: Any) -> None:
        """Initialize unknown user error.

        Parameters
        ----------
        user : Any
            The unknown identifier.
        """
        super().__init__(user)
        self.user = user

    def __str__(self) -> str:
        return f"Unknown user identifier: {self.user!r}"


class SelfFriendshipError(SocialGraphError, ValueError):
    """Raised in strict mode when a user is befriended with itself."""

    def __init__(self, user: Any) -> None:
        super().__init__(f"User {user!r} cannot be friends with itself")
        self.user = user


class NetworkFileError(SocialGraphError):
    """Raised when a network file cannot be loaded."""

    def __init__(
        self,
        message: str,
        file: str | None = None,
    ) -> None:
        """Initialize network file error.

        Parameters
        ----------
        message : str
            Error message.
        file : str | None, optional
            File where error occurred.
        """
        super().__init__(message)
        self.file = file
