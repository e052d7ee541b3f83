"""Top-level AniList client.

Builds the authorization state and dispatcher once and exposes the user API.
The authorization state is fixed for the lifetime of the client; construct a
new client to switch accounts.
"""

from typing import Optional

from anigraph.models import AuthorizationState
from anigraph.settings import Settings
from anigraph.transport import Dispatcher, GraphQLDispatcher
from anigraph.user import User


class AniList:
    """Entry point for the AniList API.

    Example:
        async with AniList(token) as anilist:
            viewer = await anilist.user.authorized_profile()
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        dispatcher: Optional[Dispatcher] = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: AniList access token. Overrides ``ANILIST_TOKEN``.
            settings: Settings to read the endpoint, timeout and token from.
                Loaded from the environment when omitted.
            dispatcher: Transport to use instead of the default
                GraphQLDispatcher.
        """
        self.settings = settings or Settings()
        if token:
            self.auth = AuthorizationState(token=token)
        else:
            self.auth = self.settings.authorization()
        self._owns_dispatcher = dispatcher is None
        self.dispatcher: Dispatcher = dispatcher or GraphQLDispatcher(
            api_url=self.settings.ANILIST_API_URL,
            auth=self.auth,
            timeout=self.settings.ANILIST_TIMEOUT,
        )
        self.user = User(self.dispatcher, self.auth)

    async def aclose(self) -> None:
        """Close the dispatcher if this client created it."""
        if self._owns_dispatcher and isinstance(self.dispatcher, GraphQLDispatcher):
            await self.dispatcher.aclose()

    async def __aenter__(self) -> "AniList":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
