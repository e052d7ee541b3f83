# WARNING: .env loading is for LOCAL DEVELOPMENT ONLY.
# Never commit your .env file or share your AniList access token.

"""Settings loader for the AniList client.

Loads the API endpoint, request timeout and optional access token from
environment variables or a .env file.

Recognised .env keys:
- ANILIST_TOKEN (optional, required only for viewer-scoped operations)
- ANILIST_API_URL (optional, defaults to the public GraphQL endpoint)
- ANILIST_TIMEOUT (optional, seconds)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from anigraph.models import AuthorizationState

DEFAULT_API_URL = "https://graphql.anilist.co"
DEFAULT_TIMEOUT = 10.0


class Settings(BaseSettings):
    """Settings for the AniList client."""

    ANILIST_TOKEN: str | None = None
    ANILIST_API_URL: str = DEFAULT_API_URL
    ANILIST_TIMEOUT: float = DEFAULT_TIMEOUT

    model_config = SettingsConfigDict(env_file=".env", extra="allow")

    def authorization(self) -> AuthorizationState:
        """Build the authorization state from the configured token."""
        return AuthorizationState(token=self.ANILIST_TOKEN or None)
