"""Exception hierarchy for anigraph.

Input-validation errors (identifier, options, authentication) are raised
before any request is dispatched. ``TransportError`` is the only error that
originates from the dispatcher and it is never retried or suppressed here.
"""

from typing import Any


class AniGraphError(Exception):
    """Base class for all anigraph errors."""


class InvalidIdentifierError(AniGraphError, TypeError):
    """Raised when a user identifier is neither a name nor a numeric id.

    Also raised when the identifier kind does not match what an operation
    accepts (e.g. a username passed to the activity feed).
    """

    def __init__(self, value: Any, expected: str = "a username or numeric id") -> None:
        """Initialize the error with the rejected value."""
        super().__init__(
            f"Invalid user identifier {value!r}: expected {expected}"
        )
        self.value = value


class UnauthenticatedError(AniGraphError):
    """Raised when an operation needs an authorized viewer but no token is set."""

    def __init__(self, message: str = "There is no current authorized user") -> None:
        """Initialize the error with an optional custom message."""
        super().__init__(message)


class InvalidOptionsError(AniGraphError, ValueError):
    """Raised when variables passed to a query are not declared by it."""

    def __init__(self, message: str, keys: list[str] | None = None) -> None:
        """Initialize the error with the offending option names."""
        super().__init__(message)
        self.keys = keys or []


class EmptyOptionsError(InvalidOptionsError):
    """Raised when a settings update is requested with no options."""

    def __init__(self) -> None:
        """Initialize the error."""
        super().__init__("Options were not provided for updating user")


class TransportError(AniGraphError):
    """Raised by a dispatcher when a request fails.

    Covers network failures, non-2xx responses, malformed bodies and
    GraphQL-reported error lists.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        """Initialize the error with the HTTP status and GraphQL errors, if any."""
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []
