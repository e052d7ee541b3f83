"""Access AniList user data.

Each method validates its input, assembles a document from the query
templates in ``anigraph.queries`` and returns the root field of the
dispatcher's result. Validation errors are raised before anything is sent;
transport errors propagate unchanged.
"""

from collections.abc import Mapping
from typing import Any

from anigraph.assembler import assemble
from anigraph.errors import EmptyOptionsError, InvalidIdentifierError, UnauthenticatedError
from anigraph.models import AuthorizationState, IdentifierKind, RequestDocument, to_identifier
from anigraph.queries import (
    RECENT_ACTIVITY,
    USER_PROFILE,
    USER_STATS,
    USER_UPDATE,
    VIEWER_PROFILE,
)
from anigraph.transport import Dispatcher


class User:
    """User operations of the AniList API.

    Normally reached through ``AniList.user`` rather than built directly.
    """

    def __init__(
        self, dispatcher: Dispatcher, auth: AuthorizationState | None = None
    ) -> None:
        """Initialize with the dispatcher and authorization state to use."""
        self.dispatcher = dispatcher
        self.auth = auth if auth is not None else AuthorizationState()

    async def _send(self, document: RequestDocument) -> dict[str, Any]:
        return await self.dispatcher.send(document.query, document.variables)

    async def profile(self, user: int | str) -> dict[str, Any]:
        """Fetch a user's basic profile.

        Args:
            user: The username or the AniList id.

        Raises:
            InvalidIdentifierError: If *user* is neither.
        """
        data = await self._send(assemble([USER_PROFILE], to_identifier(user)))
        return data["User"]

    async def stats(self, user: int | str) -> dict[str, Any]:
        """Fetch a user's anime and manga statistics.

        Args:
            user: The username or the AniList id.

        Returns:
            The ``statistics`` object with ``anime`` and ``manga`` keys.
        """
        data = await self._send(assemble([USER_STATS], to_identifier(user)))
        return data["User"]["statistics"]

    async def all(self, user: int | str) -> dict[str, Any]:
        """Fetch a user's profile and statistics in one request.

        Returns:
            Every profile key, with the statistics under ``statistics``.
        """
        data = await self._send(assemble([USER_PROFILE, USER_STATS], to_identifier(user)))
        return data["User"]

    async def recent_activity(self, user: int) -> list[dict[str, Any]]:
        """Fetch the 25 most recent activities of a user.

        Only the numeric AniList id is accepted here, not the username.

        Returns:
            List, text and message activities, newest first. Each carries a
            ``type`` field identifying its variant.

        Raises:
            InvalidIdentifierError: If *user* is not an integer id.
        """
        identifier = to_identifier(user)
        if identifier.kind is not IdentifierKind.ID:
            raise InvalidIdentifierError(user, expected="a numeric AniList id")
        data = await self._send(assemble([RECENT_ACTIVITY], identifier))
        return data["Page"]["activities"]

    async def authorized_profile(self) -> dict[str, Any]:
        """Fetch the profile of the currently authorized user.

        Raises:
            UnauthenticatedError: If the client holds no access token.
        """
        if not self.auth.present:
            raise UnauthenticatedError()
        data = await self._send(assemble([VIEWER_PROFILE]))
        return data["Viewer"]

    async def update_settings(self, options: Mapping[str, Any] | None) -> dict[str, Any]:
        """[Requires login] Update the authorized user's settings.

        Args:
            options: UserOptionsInput fields to change, e.g.
                ``{"titleLanguage": "ENGLISH"}``.

        Returns:
            The updated user with its options.

        Raises:
            EmptyOptionsError: If *options* is empty or None.
            InvalidOptionsError: If an option is not a UserOptionsInput field.
        """
        if not options:
            raise EmptyOptionsError()
        data = await self._send(assemble([USER_UPDATE], variables=options))
        return data["updateUser"]
